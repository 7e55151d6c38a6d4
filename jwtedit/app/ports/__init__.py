"""Port interfaces for the jwtedit application layer.

Domain logic depends on these ports, never on concrete implementations.
"""

__all__ = ["SignerPort"]

from jwtedit.app.ports.signer import SignerPort
