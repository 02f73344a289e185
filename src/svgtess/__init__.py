"""svgtess - Flatten SVG shape geometry into renderer-ready vertex buffers.

svgtess reads the shape elements of an SVG document (path, rect, circle and
ellipse), interprets path data into polylines, tessellates filled outlines into
triangles and batches everything into two flat vertex streams: one for fill
triangles and one for stroke line segments.

Example:
    $ svgtess logo.svg

This will create logo-geometry.json holding interleaved (x, y, z, r, g, b, a)
vertex data ready to upload to a GPU buffer.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
