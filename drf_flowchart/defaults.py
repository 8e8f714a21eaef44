# Fallbacks for settings a host project may leave undefined.

# Database alias every resource reads from and writes to
FLOWCHART_DATABASE = "default"

# Direction token of the graph document header (`graph TD;`)
FLOWCHART_GRAPH_DIRECTION = "TD"

# Run the graph exporter's two reads inside one transaction
FLOWCHART_ATOMIC_EXPORT = True
