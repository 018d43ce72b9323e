"""biqschema — shared data model and wire contract for the Biq device fleet."""

__version__ = "0.1.0"
