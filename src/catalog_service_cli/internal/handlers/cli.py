"""Adaptor for the CLI driving actor."""

import argparse
import logging
import sys
from typing import TextIO

from returns.result import Failure, ResultE

from catalog_service_cli.internal import config, entities, ports, services

log = logging.getLogger("catalog-service-cli")

_USAGE_EXAMPLES: str = """\
examples:
  create:        --op=create --service-type=document-store --service=aaa --replicas=3 --volume-size=20
  check-init:    --op=check-init --region=us-west-1 --cluster=default --service=aaa --admin=admin --passwd=passwd
  delete:        --op=delete --region=us-west-1 --cluster=default --service=aaa
  list:          --op=list --region=us-west-1 --cluster=default
  get:           --op=get --region=us-west-1 --cluster=default --service=aaa
  list-members:  --op=list-members --region=us-west-1 --cluster=default --service=aaa
  get-config:    --op=get-config --region=us-west-1 --cluster=default --service=aaa --service-uuid=auuid --fileid=configfileID
"""


class CLIHandler:
    """CLI driving actor.

    Validates the command-line input, routes it to exactly one operation
    of the core, and maps the outcome to an exit code.
    """

    management_adaptor: type[ports.ManagementRepository]
    env: config.CatalogEnv
    out: TextIO

    def __init__(
        self,
        management_adaptor: type[ports.ManagementRepository],
        env: config.CatalogEnv | None = None,
        out: TextIO | None = None,
    ) -> None:
        """Create a new instance."""
        self.management_adaptor = management_adaptor
        self.env = env or config.CatalogEnv()
        self.out = out or sys.stdout

    @property
    def parser(self) -> argparse.ArgumentParser:
        """Return the CLI argument parser."""
        parser = argparse.ArgumentParser(
            description="Create and query catalog services on a cluster",
            epilog="\n".join((_USAGE_EXAMPLES, self.env.describe_env())),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        parser.add_argument(
            "--op",
            "--operation",
            dest="operation",
            help=f"The operation type: {'|'.join(op.value for op in entities.Operation)}",
            default="",
        )
        parser.add_argument(
            "--service-type",
            help="The catalog service type: document-store (mongodb)|relational-store (postgresql)",
            default="",
        )

        target = parser.add_argument_group("target")
        target.add_argument("--region", help="The target region", default="")
        target.add_argument("--cluster", help="The target cluster", default="default")
        target.add_argument("--service", help="The target service name", default="")
        target.add_argument(
            "--server-url",
            help="The management service url, default: "
            + entities.resolve_manage_service_url("", "<cluster>", tls_enabled=False),
            default="",
        )

        create = parser.add_argument_group("create")
        create.add_argument(
            "--replicas", type=int, default=3, help="The number of replicas for the service",
        )
        create.add_argument(
            "--volume-size", type=int, default=0, help="The size of each volume, unit: GB",
        )
        create.add_argument(
            "--cpu-units",
            type=int,
            default=entities.DEFAULT_RESERVE_CPU_UNITS,
            help="The number of cpu units to reserve for the container",
        )
        create.add_argument(
            "--soft-memory",
            type=int,
            default=entities.DEFAULT_RESERVE_MEMORY_MB,
            help="The memory reserved for the container, unit: MB",
        )
        create.add_argument(
            "--poll-interval",
            type=int,
            default=None,
            help="Seconds between two initialization checks "
            f"(default: {self.env.CATALOG_POLL_INTERVAL_SECONDS})",
        )
        create.add_argument(
            "--max-wait",
            type=int,
            default=None,
            help="Seconds to wait for the service to initialize "
            f"(default: {self.env.CATALOG_MAX_WAIT_SECONDS})",
        )

        security = parser.add_argument_group("security")
        security.add_argument(
            "--admin",
            default="dbadmin",
            help="The DB admin. For relational stores, the default user "
            f"'{entities.DEFAULT_RELATIONAL_ADMIN}' is always used",
        )
        security.add_argument("--passwd", default="changeme", help="The DB admin password")
        security.add_argument(
            "--replication-user",
            default="repluser",
            help="The user the relational standby replicates from the primary as",
        )
        security.add_argument(
            "--replication-passwd",
            default="replpassword",
            help="The password for the relational standby to access the primary",
        )
        security.add_argument("--tls-enabled", action="store_true", help="Whether tls is enabled")
        security.add_argument("--ca-file", default="", help="The ca file")
        security.add_argument("--cert-file", default="", help="The cert file")
        security.add_argument("--key-file", default="", help="The key file")

        lookup = parser.add_argument_group("list and get-config")
        lookup.add_argument("--prefix", default="", help="Only list services with this prefix")
        lookup.add_argument("--service-uuid", default="", help="The service uuid")
        lookup.add_argument("--fileid", default="", help="The config file id")

        return parser

    def parse_options(self, args: argparse.Namespace) -> ResultE[entities.CommandOptions]:
        """Parse the command-line arguments and environment into the options of the invocation."""
        poll_result = entities.PollOptions.create(
            interval_seconds=self.env.CATALOG_POLL_INTERVAL_SECONDS
            if args.poll_interval is None
            else args.poll_interval,
            max_wait_seconds=self.env.CATALOG_MAX_WAIT_SECONDS
            if args.max_wait is None
            else args.max_wait,
        )
        return poll_result.map(
            lambda poll: entities.CommandOptions(
                operation=args.operation,
                region=args.region or self.env.default_region(),
                cluster=args.cluster,
                service_name=args.service,
                service_type=args.service_type,
                server_url=args.server_url,
                replicas=args.replicas,
                volume_size_gb=args.volume_size,
                cpu_units=args.cpu_units,
                soft_memory_mb=args.soft_memory,
                admin=args.admin,
                admin_password=args.passwd,
                replication_user=args.replication_user,
                replication_password=args.replication_passwd,
                tls_enabled=args.tls_enabled,
                ca_file=args.ca_file,
                cert_file=args.cert_file,
                key_file=args.key_file,
                service_uuid=args.service_uuid,
                file_id=args.fileid,
                prefix=args.prefix,
                poll=poll,
                request_timeout_seconds=self.env.CATALOG_REQUEST_TIMEOUT_SECONDS,
            ),
        )

    def _connect(
        self,
        options: entities.CommandOptions,
        tls: entities.TLSMaterial | None,
    ) -> ResultE[ports.CatalogUseCase]:
        """Create the core service against the resolved management service."""
        server_url = entities.resolve_manage_service_url(
            options.server_url,
            options.cluster,
            tls_enabled=tls is not None,
        )
        log.debug(f"Using management service at '{server_url}'")
        return services.CatalogService.from_adaptor(
            management_adaptor=self.management_adaptor,
            server_url=server_url,
            tls=tls,
            poll_options=options.poll,
            timeout_seconds=options.request_timeout_seconds,
        )

    def dispatch(self, options: entities.CommandOptions) -> ResultE[str]:
        """Validate the options and run the selected operation.

        All local validation happens before any call to the control plane.

        Returns:
            The output of the operation, or the reason it failed.
        """
        op_result = entities.Operation.parse(options.operation)
        if isinstance(op_result, Failure):
            return op_result
        op = op_result.unwrap()

        if op.requires_service_name and not options.service_name:
            return Failure(entities.ValidationError("please specify the valid service name"))

        tls_result = entities.TLSMaterial.from_paths(
            enabled=options.tls_enabled,
            ca_path=options.ca_file,
            cert_path=options.cert_file,
            key_path=options.key_file,
        )
        if isinstance(tls_result, Failure):
            return tls_result
        tls = tls_result.unwrap()

        if not options.region:
            return Failure(entities.ValidationError("please specify the region"))

        match op:
            case entities.Operation.CREATE:
                create_result = entities.ServiceType.parse(options.service_type).bind(
                    lambda st: entities.build_create_request(st, options),
                )
                return create_result.do(
                    message
                    for request in create_result
                    for service in self._connect(options, tls)
                    for message in service.create(request)
                )

            case entities.Operation.CHECK_INIT:
                check_result = entities.ServiceType.parse(
                    options.service_type or entities.ServiceType.DOCUMENT_STORE,
                ).map(
                    lambda st: entities.CheckInitRequest(
                        service_type=st,
                        service=options.identity(),
                        admin=options.admin,
                        admin_password=options.admin_password,
                    ),
                )
                return check_result.do(
                    "service initialized" if initialized else "service is initializing"
                    for request in check_result
                    for service in self._connect(options, tls)
                    for initialized in service.check_init(request)
                )

            case entities.Operation.DELETE:
                return (
                    self._connect(options, tls)
                    .bind(lambda service: service.delete(options.identity()))
                    .map(str)
                )

            case entities.Operation.LIST:
                request = entities.ListServicesRequest(
                    region=options.region,
                    cluster=options.cluster,
                    prefix=options.prefix,
                )
                return (
                    self._connect(options, tls)
                    .bind(lambda service: service.list_services(request))
                    .map(
                        lambda svcs: "\n\t".join(
                            [f"List {len(svcs)} services:", *(str(s) for s in svcs)],
                        ),
                    )
                )

            case entities.Operation.GET:
                return (
                    self._connect(options, tls)
                    .bind(lambda service: service.get_service(options.identity()))
                    .map(str)
                )

            case entities.Operation.LIST_MEMBERS:
                return (
                    self._connect(options, tls)
                    .bind(lambda service: service.list_members(options.identity()))
                    .map(_format_members)
                )

            case entities.Operation.GET_CONFIG:
                config_result = entities.build_get_config_request(options)
                return config_result.do(
                    f"{cfg.file_name} (fileid {cfg.file_id}):\n{cfg.content}"
                    for request in config_result
                    for service in self._connect(options, tls)
                    for cfg in service.get_config(request)
                )

    def run(self, argv: list[str] | None = None) -> int:
        """Run the CLI handler.

        Returns the appropriate exit code.
        """
        args = self.parser.parse_args(argv)
        result = self.parse_options(args).bind(self.dispatch)
        if isinstance(result, Failure):
            exc = result.failure()
            if isinstance(exc, entities.DeletionError):
                print(exc.report, file=self.out)
            if isinstance(exc, entities.ValidationError | entities.ConfigurationError):
                log.error(f"{exc}. See --help for usage.")
            else:
                log.error(f"Failed to run {args.operation}: {exc}")
            return 1

        print(result.unwrap(), file=self.out)
        return 0


def _format_members(members: list[entities.ServiceMember]) -> str:
    lines: list[str] = [f"List {len(members)} members:"]
    for member in members:
        lines.append(f"\t{member}")
        lines.extend(f"\t\t{cfg}" for cfg in member.configs)
    return "\n".join(lines)
