"""Constants for httpstat."""

# Subprocess timeout (seconds)
DEFAULT_TIMEOUT = 10

# Flags that collide with the options httpstat injects into the curl command
DISALLOWED_FLAGS = ("-w", "-D", "-o", "-s", "--write-out", "--dump-header", "--output", "--silent")

# curl short options that consume a value (inline as -Hfoo or as the next argument)
CURL_SHORT_WITH_VALUE = frozenset("AbcCdDeEFHKmoPQrtTuUwxXyYz")

# curl exits with 28 when --max-time is exceeded
CURL_TIMEOUT_EXIT_CODE = 28

# Characters of the response body shown when HTTPSTAT_SHOW_BODY is set
BODY_PREVIEW_LIMIT = 1024

# Exit codes
EXIT_PARSE_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INVOCATION_ERROR = 1
EXIT_NOT_FOUND = 127
EXIT_TIMEOUT = 124

# Emitted by curl -w after the transfer finishes. Strings are quoted so empty
# values (e.g. no local port on a failed connect) still decode.
CURL_WRITE_OUT = """{
    "time_namelookup": %{time_namelookup},
    "time_connect": %{time_connect},
    "time_appconnect": %{time_appconnect},
    "time_pretransfer": %{time_pretransfer},
    "time_redirect": %{time_redirect},
    "time_starttransfer": %{time_starttransfer},
    "time_total": %{time_total},
    "speed_download": %{speed_download},
    "speed_upload": %{speed_upload},
    "size_download": %{size_download},
    "remote_ip": "%{remote_ip}",
    "remote_port": "%{remote_port}",
    "local_ip": "%{local_ip}",
    "local_port": "%{local_port}"
}"""
