"""Infrastructure Layer — Google clients, credentials and logging.

Invariants:
    - Every Google API failure leaves this layer as a DocsBridgeError
    - Blocking client calls never run on the event loop

Design Decisions:
    - Error-mapping wrapper over the raw discovery client
"""
