"""Qt user interface: ports, adapters, presenter and the main window."""
