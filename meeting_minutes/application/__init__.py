"""Application layer: entity services exposed to external collaborators."""
