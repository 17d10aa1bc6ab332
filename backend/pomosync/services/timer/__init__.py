"""Timer domain services: the shared countdown engine and its tick driver.

Everything here is transport-agnostic; Socket.IO wiring lives in
``pomosync.sync`` and ``pomosync.socketio_events``.
"""
