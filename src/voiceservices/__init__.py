"""Voice Services Provider Plugin - Root Package.

This package provides the Azure Communications Gateway resource for a
declarative-infrastructure host. The host plans changes; this package turns
a planned configuration into Azure Resource Manager calls and projects the
remote state back into configuration.

Key Components:
    - domain: Gateway configuration model, identity and exceptions
    - providers: Azure wire model, translators, SDK adapter and resources
    - infrastructure: Host boundary (resource metadata, schema) and registry
    - config: Typed configuration and loading
    - helpers: Logging setup
"""

__version__ = "0.1.0"
__package_name__ = "voiceservices-provider"
