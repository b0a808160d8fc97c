from rnafoldml.folding.common_traceback import TraceResult
from rnafoldml.folding import nussinov, akutsu

__all__ = ["TraceResult", "nussinov", "akutsu"]
