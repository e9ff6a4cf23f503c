"""Domain class for the TLS material securing the control plane channel."""

import dataclasses

from returns.result import Failure, ResultE, Success

from .errors import ConfigurationError


@dataclasses.dataclass(slots=True, frozen=True)
class TLSMaterial:
    """Paths to the certificate authority, certificate and private key files."""

    ca_path: str
    cert_path: str
    key_path: str

    @classmethod
    def from_paths(
        cls,
        enabled: bool,
        ca_path: str = "",
        cert_path: str = "",
        key_path: str = "",
    ) -> ResultE["TLSMaterial | None"]:
        """Assemble TLS material from the given paths.

        The three paths must be given all together or not at all.
        When TLS is enabled, all three are required.

        Args:
            enabled: Whether TLS is enabled.
            ca_path: The certificate authority file.
            cert_path: The client certificate file.
            key_path: The client private key file.

        Returns:
            The TLS material, None if TLS is not in use,
            or a ConfigurationError describing the missing paths.
        """
        paths = {"ca file": ca_path, "cert file": cert_path, "key file": key_path}
        missing = [name for name, path in paths.items() if not path]
        if len(missing) == 0:
            if not enabled:
                return Success(None)
            return Success(cls(ca_path=ca_path, cert_path=cert_path, key_path=key_path))
        if len(missing) == len(paths) and not enabled:
            return Success(None)

        return Failure(
            ConfigurationError(
                f"tls {'enabled' if enabled else 'partially configured'} "
                f"without {', '.join(missing)} "
                f"(ca file '{ca_path}', cert file '{cert_path}', key file '{key_path}')",
            ),
        )
