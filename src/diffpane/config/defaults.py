"""Default configuration values and starter .diffpane.toml template."""

DEFAULT_TOML = """\
# diffpane configuration
version = "1.0"

[preview]
header_style = "summary"     # verbatim | summary | suppressed
highlight_style = "full"     # full | text; full extends highlights to the window edge
wrap = false
show_no_newline = true       # show "\\ No newline at end of file" markers
layout = "inline"            # inline | side_by_side

[diff]
algorithm = "histogram"      # myers | minimal | patience | histogram
context_lines = 3
"""

FULL_TOML = DEFAULT_TOML + """
[budget]
instant_ceiling = 500        # style synchronously at or below this many lines
deferred_ceiling = 2000      # style in one deferred pass at or below this
total_ceiling = 5000         # truncate and warn above this
defer_delay_ms = 50
chunk_size = 200
chunk_delay_ms = 10
"""
