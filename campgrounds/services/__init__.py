from .stores import CampgroundStore, ReviewStore

__all__ = ["CampgroundStore", "ReviewStore"]
