"""Application layer: use cases, DTOs, ports and the error taxonomy."""
