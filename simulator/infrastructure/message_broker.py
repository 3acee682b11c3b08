import simpy


class MessageBroker:
    """
    Topic-based publish-subscribe hub between dispatch components.

    Once a recorder (e.g. DispatchStatistics) has asked for the broadcast
    pipe, every published message also lands there so the whole system can
    be observed without subscribing to each topic. Without a recorder nothing
    is buffered.
    """
    def __init__(self, env: simpy.Environment, verbose: bool = True):
        """
        Initialize the message broker

        Args:
            env (simpy.Environment): SimPy environment
            verbose (bool): Print every publish to the console
        """
        self.env = env
        self.verbose = verbose
        self.topics = {}  # topic -> Store, created when first subscribed
        self.broadcast_pipe = None  # created by the first get_broadcast_pipe()

    def get_pipe(self, topic: str) -> simpy.Store:
        """
        Get or create the Store backing the specified topic
        """
        if topic not in self.topics:
            self.topics[topic] = simpy.Store(self.env)
        return self.topics[topic]

    def put(self, topic: str, message):
        """
        Publish a message to the specified topic and to the broadcast pipe.

        Topics nobody has subscribed to are not materialised, and the broadcast
        pipe only exists once requested, so publishing without listeners does
        not accumulate unread messages.
        """
        if self.verbose:
            print(f"{self.env.now:.2f} [Broker] Publish on '{topic}': {message}")
        event = None
        if self.broadcast_pipe is not None:
            event = self.broadcast_pipe.put({'topic': topic, 'message': message})
        if topic in self.topics:
            return self.topics[topic].put(message)
        return event

    def get(self, topic: str):
        """
        Wait to receive (get) a message from the specified topic
        """
        return self.get_pipe(topic).get()

    def get_broadcast_pipe(self) -> simpy.Store:
        """Returns the global broadcast pipe, creating it on first use"""
        if self.broadcast_pipe is None:
            self.broadcast_pipe = simpy.Store(self.env)
        return self.broadcast_pipe

    def get_current_time(self) -> float:
        """
        Get current simulation time

        Lets the dispatch controller timestamp messages without reaching
        into the SimPy environment directly.
        """
        return self.env.now
