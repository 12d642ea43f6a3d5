"""
glidesim: flight dynamics of wingsuits, canopies and skydivers.

Segmented aerodynamics on the Kirchhoff separation model, composite
canopy-pilot mass properties with apparent mass, and a 6-DOF rigid-body
integrator.
"""

__version__ = '0.1.0'
