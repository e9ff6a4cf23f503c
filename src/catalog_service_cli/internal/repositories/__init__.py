"""Implementation of adaptors for driven actors.

Driven actors
--------------

A driven actor is an external component that is acted upon by the core logic.
Also referred to as *secondary* actors, a driven actor represents an external
system that the core logic interacts with. They extend the core driven ports
(see `catalog_service_cli.internal.ports`) in their implementation.

Examples of driven or secondary actors include:

- a database
- a message queue
- a remote management API

Since they hold the state the core acts upon, they are referred to in this package
(and often in hexagonal architecture documentation) as *repositories*.

This module
-----------

This module contains implementations for the following driven actors:

- Management Repository - The control plane of the cluster, owning all service state

It inherits from the repository ports specified in the core via
`catalog_service_cli.internal.ports`.
"""
from . import (
    management_repositories,
)

__all__ = [
    "management_repositories",
]
