"""
Simulator Tests

Tests for the simulated dispatch entities:
- Elevator records and their invariant
- Fleet registry updates
- Hall buttons
- Pending request queue
- Trip timers
"""
