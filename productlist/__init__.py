"""Product list API: catalog queries over a persistent product store."""
