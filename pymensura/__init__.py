"""
.. This module acts as the top-level API documentation.

.. module: pymensura

Dimensional analysis and units of measure.

    - :mod:`pymensura.units`: Dimensions, units, scales and measures.
    - :mod:`pymensura.quantities`: Measures with range checks, such as
      angles, latitudes and astronomical magnitudes.
    - :mod:`pymensura.logger`: Library logging.
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 10)
