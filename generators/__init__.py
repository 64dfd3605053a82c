from .data_factory import PopulationGenerator

__all__ = ["PopulationGenerator"]
