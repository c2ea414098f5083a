"""Console registry of federative units kept in a fixed-slot binary file, with a simple code/sigla list tool."""

__version__ = "0.1.0"