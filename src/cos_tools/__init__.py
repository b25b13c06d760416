"""Command-line client for IBM Cloud Object Storage and other S3-compatible services.

Each command binds its flags into a typed request for one storage operation,
resolves the target region, runs the operation and renders the response as
text or JSON.

Key Features:
    - Shorthand (``Objects=[{Key=a}],Quiet=true``) and JSON structured flags
    - Request fields checked against the service model before any network call
    - Persistent defaults managed with ``cos-tools config``
    - Text or JSON output

Programmatic Usage:

    >>> from cos_tools.binding import InvocationContext
    >>> from cos_tools.commands.specs import DELETE_OBJECTS
    >>> from cos_tools.core.plugin_config import PluginConfig
    >>> from cos_tools.objectstorage import execute_operation
    >>> invocation = InvocationContext.from_flags(
    ...     {"bucket": "b", "delete": "Objects=[{Key=a}]", "region": "us-south"}
    ... )
    >>> result = execute_operation(DELETE_OBJECTS, invocation, PluginConfig.from_settings())
"""

__version__ = "0.1.0"
