"""Console menu and terminal input/output."""
