"""flowspec command line interface."""
