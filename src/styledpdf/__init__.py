"""styledpdf: render styled text and CSV files into paginated PDFs.

The layout engine lives in :mod:`styledpdf.layout`; it measures and draws
through the protocols in :mod:`styledpdf.surface`.  Configuration, input
parsing, PDF output, directory polling and the command line interface build
on top of it.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
