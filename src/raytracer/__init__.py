"""CPU path tracer.

Casts rays from a thin-lens camera, finds nearest hits through a bounding
volume hierarchy and follows diffuse, metallic and refractive scattering to
produce gamma-corrected RGBA8 images, optionally across a process pool.

Subpackages:
    core: Vector3, Ray, Interval, AABB and sampling helpers
    geometry: Hittable interface, spheres, BVH and the World aggregate
    materials: Lambertian, Metal, Dielectric materials and textures
    camera: Camera model with depth of field
    renderer: Pixel sampling, recursive ray color and gamma encoding
"""

__version__ = "0.1.0"
