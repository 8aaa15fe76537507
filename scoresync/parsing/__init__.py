"""
This package contains everything needed to turn the controller's raw byte
stream into scoreboard state updates.

Sub-packages handle each stage:

- ``framing``: STX/ETX frame extraction from the byte stream.
- ``layouts``: Fixed-width frame layouts and ordered dispatch.
"""
