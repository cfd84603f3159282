"""Application layer - Use cases and orchestration.

This layer contains the read-side use case of the service following the
CQRS pattern: a query dataclass and the handler that answers it by
orchestrating the catalog fetcher and the resident resolver.

Structure:
- queries/: Query dataclasses and handlers (read operations)
- errors/: Stage-labelled application errors

The application layer orchestrates domain logic but performs no I/O itself.
"""
