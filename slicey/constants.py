"""Environment variable constants for the Slicey library.

This module centralizes all environment variable keys used throughout the Slicey library
to avoid hardcoded strings.
"""

# Configuration
SLICEY_CONFIG = "SLICEY_CONFIG"
"""Environment variable to specify the SliceyConfig implementation.
Set this to a fully qualified class name to use a custom SliceyConfig implementation.
Default: slicey.config.default_slicey_config.DefaultSliceyConfig
"""

# Serializer Configuration
SLICEY_SERIALIZER = "SLICEY_SERIALIZER"
"""Environment variable to override the default serializer implementation.
Set this to a fully qualified class name to use a custom Serializer implementation.
Default: slicey.serializers.pydantic_serializer.PydanticSerializer
"""

# Logging
SLICEY_LOG_LEVEL = "SLICEY_LOG_LEVEL"
"""Environment variable to set the log level of the command line tool when --log-level
is not given. Default: WARNING
"""
