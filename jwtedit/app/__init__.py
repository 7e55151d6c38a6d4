"""Application layer for jwtedit: ports, adapters, and the signing service."""
