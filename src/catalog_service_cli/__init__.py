"""Catalog Service CLI.

Usage Documentation
===================

The ``catalog-service-cli`` command drives the management service of a cluster
to create, inspect and delete catalog services: replicated document-store
(MongoDB) and relational-store (PostgreSQL) databases. For instance::

    $ catalog-service-cli --op=create --service-type=document-store \\
        --region=us-west-1 --cluster=default --service=mymongo \\
        --replicas=3 --volume-size=20 --admin=dbadmin --passwd=changeme

creates a three-replica document store, then waits for it to initialize.
Run ``catalog-service-cli --help`` for all operations and options.

The command exits with code 0 on success, and 1 on any failure.

Deleting a service never deletes the volumes of its members. They are listed
on completion so that they can be deleted manually.

Configuration
-------------

The following environment variables can be used to configure the application:

.. code-block:: none

    | Key                             | Description                              | Default |
    |---------------------------------|------------------------------------------|---------|
    | LOGLEVEL                        | The logging level for the app.           | INFO    |
    |---------------------------------|------------------------------------------|---------|
    | CATALOG_POLL_INTERVAL_SECONDS   | Seconds between initialization checks.   | 10      |
    |---------------------------------|------------------------------------------|---------|
    | CATALOG_MAX_WAIT_SECONDS        | Seconds to wait for initialization.      | 120     |
    |---------------------------------|------------------------------------------|---------|
    | CATALOG_REQUEST_TIMEOUT_SECONDS | Timeout of a single management call.     | 30      |
    |---------------------------------|------------------------------------------|---------|
    | AWS_REGION, AWS_DEFAULT_REGION  | The region, when --region is not given.  |         |
    |---------------------------------|------------------------------------------|---------|


Development Documentation
=========================

Getting started for development
-------------------------------

In order to work on the project, first clone the repository.
Then, create a virtual environment and install the dependencies
using an editable pip installation::

    $ python -m venv ./venv
    $ source ./venv/bin/activate
    $ pip install -e .[dev]

.. note:: ZSH users may have to escape the square brackets in the last command.

This enables the use of the 'catalog-service-cli' command in the virtualenv, which
runs the `catalog_service_cli.cmd.main.run_cli` entrypoint. The editable installation
ensures that changes to the code are immediately reflected while using the command.

Tests sit beside the modules they test, and run with ``python -m pytest src``.


Project structure
-----------------

The code is structured following principles from the `Hexagonal Architecture`_ pattern.
In brief, this means a clear separation between
the application's business logic - it's *core* - and the *actors* that are external to it.

The core of the tool is split into three main components:

- `catalog_service_cli.internal.entities` - The domain classes that define the structure
  of the data that the core works with, and the business logic they contain.
- `catalog_service_cli.internal.ports` - The interfaces that define how the core
  interacts with external actors.
- `catalog_service_cli.internal.services` - The business logic that defines how the tool
  functions: waiting for initialization, and sequencing deletion.

Alongside these core components are the actors, which adhere to the interfaces defined in the
ports module. Actors come in two flavours, *driving* and *driven*.
Driven actors are systems the core acts upon, such as the cluster's management service,
while driving actors are methods of interacting with the core, such as a command-line interface.

This application currently has the following defined actors:

- `catalog_service_cli.internal.repositories.management_repositories` (driven) -
  The management service of the cluster.
- `catalog_service_cli.internal.handlers.cli` (driving) - The command-line interface.

The actors are then responsible for implementing the abstract ports,
and are *dependency-injected* in at runtime. This allows the core to be easily tested
and extended.

Where do I go to...?
--------------------

- **...modify the business logic?** Check out the `internal.services` module.
- **...talk to the management service differently?** Implement a new repository in
  `internal.repositories.management_repositories`.
- **...modify the command line interface?** Check out `internal.handlers.cli`.

.. _Hexagonal Architecture: https://alistair.cockburn.us/hexagonal-architecture/
"""

import logging
import os
import sys

if sys.stdout.isatty():
    # Simple logging for terminals
    _formatstr="%(levelname)s [%(name)s] | %(message)s"
else:
    # JSON logging for containers
    _formatstr="".join((
        "{",
        '"message": "%(message)s", ',
        '"severity": "%(levelname)s", "timestamp": "%(asctime)s.%(msecs)03dZ", ',
        '"logging.googleapis.com/labels": {"python_logger": "%(name)s"}, ',
        '"logging.googleapis.com/sourceLocation": ',
        '{"file": "%(filename)s", "line": %(lineno)d, "function": "%(funcName)s"}',
        "}",
    ))

_loglevel: int | str = logging.getLevelName(os.getenv("LOGLEVEL", "INFO").upper())
logging.basicConfig(
    level=logging.INFO if isinstance(_loglevel, str) else _loglevel,
    stream=sys.stdout,
    format=_formatstr,
    datefmt="%Y-%m-%dT%H:%M:%S",
)

for logger in [
    "urllib3",
    "requests",
]:
    logging.getLogger(logger).setLevel(logging.WARNING)
