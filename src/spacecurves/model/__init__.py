"""
The MODEL layer contains pure data structures: points, the curve variants
and the builder of random curve collections.
It has NO knowledge of console output or of the thread pool.
"""
