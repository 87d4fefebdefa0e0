"""Pure domain pieces: status codes, operation results, path helpers.

Nothing here touches the filesystem, so the console layer and the tests can
import it freely.
"""
__all__ = ["paths", "results", "status"]
