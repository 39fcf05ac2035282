from .fragments import FragmentParser
from .serializer import CSharpSerializer

__all__ = ["CSharpSerializer", "FragmentParser"]
