"""Shared service-layer building blocks: errors, DTOs, entities and ports."""
