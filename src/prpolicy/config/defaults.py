"""Starter .prpolicy.toml and .prpolicy.yml templates."""

DEFAULT_TOML = """\
# prpolicy configuration
[policy]
path = ".prpolicy.yml"

[output]
format = "terminal"       # terminal | json
show_summary = true

[logging]
level = "WARNING"         # DEBUG | INFO | WARNING | ERROR
"""

DEFAULT_POLICY = """\
# Predicates evaluated against each pull request.
predicates:
  title:
    not_matches: ["^WIP", "\\\\[draft\\\\]"]
  has_valid_signatures: true
  # has_valid_signatures_by:
  #   users: ["alice"]
  #   teams: ["acme/maintainers"]
  #   organizations: ["acme"]
  # has_valid_signatures_by_keys:
  #   key_ids: ["3AA5C34371567BD2"]
"""
