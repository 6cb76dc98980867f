"""
A Monte Carlo path tracer.

Scenes are built from hittable geometry (spheres, quads, instance wrappers and
constant-density media), shaded with scattering materials, and rendered by a
camera that traces sample paths per pixel.
"""

__version__ = "0.1.0"
