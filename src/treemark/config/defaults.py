"""Starter .treemark.toml template."""

CONFIG_FILENAME = ".treemark.toml"

DEFAULT_TOML = """\
# treemark configuration
version = "1.0"

[status]
base_branch = "HEAD"      # ref used for ls-tree and the committed diff
include_committed = false # also show base...HEAD changes in the index column
show_ignored = true       # mark entries git does not track as ignored

[output]
format = "terminal"       # terminal | json | yaml
show_summary = true

[symbols.index]
# "M" = "~"

[symbols.working_tree]
# "?" = "+"
"""
