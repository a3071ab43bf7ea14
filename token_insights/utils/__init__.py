"""
Utility functions module.

Time helpers used for request processing metadata. Analysis results never
depend on wall-clock time; only the metadata attached at the request
boundary does.
"""
