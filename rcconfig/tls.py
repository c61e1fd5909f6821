# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Transport layer security options shared by programs that use TLS for encryption
and, optionally, authentication.

Not every option is needed in every setup; without client authentication no
keystore is required, for example. The options can be resolved on their own through
`TlsConfig` or added to an application schema with `Schema.with_options`.

Example:
    schema = Schema.build("agent", "1.0", "Agent.", AGENT_OPTIONS)
    schema = schema.with_options(TlsConfig.options())
    config = resolve(schema, sys.argv, "AGENT_CONFIG")
    tls = TlsConfig.materialize(config)
"""
from __future__ import annotations

from dataclasses import dataclass

from rcconfig.schema import OptionSpec, Schema
from rcconfig.values import ResolvedConfig


@dataclass(frozen=True)
class TlsSettings:
    keystore_location: str | None = None
    keystore_password: str | None = None
    truststore_location: str | None = None
    truststore_password: str | None = None
    enabled_ciphers: tuple[str, ...] = ()
    enabled_protocols: tuple[str, ...] = ()

    @property
    def client_auth(self) -> bool:
        return self.keystore_location is not None


class TlsConfig:
    """Option set and materializer for `TlsSettings`."""

    KEYSTORE_LOCATION = OptionSpec(
        "tls-keystore-location",
        help="The location of the keystore to use when connecting to the "
        "orchestrator, keystore should be in PKCS12 format.",
        documentation="Specify a file in PKCS12 format that should be used to obtain "
        "keys used for encryption. The keystore can contain additional keys beside "
        "the needed one, in that case the first suitable key that is found will be "
        "used.",
    )
    KEYSTORE_PASSWORD = OptionSpec(
        "tls-keystore-password",
        help="The password that is necessary to access the keystore, if one is "
        "required.",
    )
    TRUSTSTORE_LOCATION = OptionSpec(
        "tls-truststore-location",
        help="The location of the truststore to use when connecting to the "
        "orchestrator.",
        documentation="Specify a file in PKCS12 format that should be used to check "
        "if certificates are signed by a trusted authority. Any certificate signed "
        "with the private key belonging to one of the public keys in this truststore "
        "will be accepted as valid.",
    )
    TRUSTSTORE_PASSWORD = OptionSpec(
        "tls-truststore-password",
        help="The password that is necessary to access the truststore, if one is "
        "required.",
    )
    ENABLED_CIPHERS = OptionSpec(
        "tls-enabled-ciphers",
        repeatable=True,
        help="Cipher suites that are accepted when negotiating an encryption mode.",
        documentation="Allow-list of cipher suites acceptable when initiating a "
        "secured connection. If left empty the TLS library's defaults are used.",
    )
    ENABLED_PROTOCOLS = OptionSpec(
        "tls-enabled-protocols",
        repeatable=True,
        help="Protocol versions that may be used.",
        documentation="Any peer that does not support one of the versions listed "
        "here will be rejected and no connection will be possible.",
    )

    @classmethod
    def options(cls) -> list[OptionSpec]:
        return [
            cls.KEYSTORE_LOCATION,
            cls.KEYSTORE_PASSWORD,
            cls.TRUSTSTORE_LOCATION,
            cls.TRUSTSTORE_PASSWORD,
            cls.ENABLED_CIPHERS,
            cls.ENABLED_PROTOCOLS,
        ]

    @classmethod
    def describe(cls) -> Schema:
        return Schema.build(
            "tls-options",
            "0.1",
            "TLS options to be added to other configurations.",
            cls.options(),
        )

    @classmethod
    def materialize(cls, config: ResolvedConfig) -> TlsSettings:
        return TlsSettings(
            keystore_location=config.get_value(cls.KEYSTORE_LOCATION),
            keystore_password=config.get_value(cls.KEYSTORE_PASSWORD),
            truststore_location=config.get_value(cls.TRUSTSTORE_LOCATION),
            truststore_password=config.get_value(cls.TRUSTSTORE_PASSWORD),
            enabled_ciphers=config.values_of(cls.ENABLED_CIPHERS),
            enabled_protocols=config.values_of(cls.ENABLED_PROTOCOLS),
        )
