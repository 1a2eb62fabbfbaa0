"""Templates for layout file initialization."""

LAYOUT_YAML_TEMPLATE = """# coltable layout
# truncate_at: maximum characters shown per value (0 = never truncate)
# justify: left | right
columns:
  - name: Name
  - name: Status
    truncate_at: 8
  - name: Tags
  - name: Size
    justify: right

show_headers: true

# A value given as a list is shown as stacked lines within its row.
# Numbers are shown as YAML reads them; quote them to keep the exact text
# (e.g. "12.50" rather than 12.50).
rows:
  - ["api", "running", ["web", "public"], "120"]
  - ["worker", "restarting", "batch", "8"]
"""
