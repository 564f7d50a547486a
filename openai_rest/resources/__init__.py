"""Endpoint façades exported for the clients."""
from .assistants import Assistants
from .audio import Audio
from .completions import Completions
from .embeddings import Embeddings
from .files import Files
from .fine_tuning import FineTunes, FineTuning
from .images import Images
from .models import Models
from .moderations import Moderations
from .projects import Projects
from .threads import Threads
from .vector_stores import VectorStores

__all__ = [
    "Assistants",
    "Audio",
    "Completions",
    "Embeddings",
    "Files",
    "FineTunes",
    "FineTuning",
    "Images",
    "Models",
    "Moderations",
    "Projects",
    "Threads",
    "VectorStores",
]
