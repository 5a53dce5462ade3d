"""Default configuration values."""

DEFAULT_CONFIG_YAML = """
config:
  color: true

presets:
  logs:
    description: "error, warning and note markers"
    patterns:
      - "(?i)error:"
      - "(?i)warning:"
      - "(?i)note:"
    color_map: "red+bold,yellow+bold,cyan+bold"

  quoted:
    description: "double quoted strings"
    patterns:
      - '"[^"]*"'
    color_map: "green+bold"

  timestamps:
    description: "ISO 8601 dates and times"
    patterns:
      - "\\\\d{4}-\\\\d{2}-\\\\d{2}[T ]\\\\d{2}:\\\\d{2}:\\\\d{2}(?:\\\\.\\\\d+)?"
    color_map: "gray"
"""
