"""KMB route browser: search KMB bus routes and drill into their stops."""
