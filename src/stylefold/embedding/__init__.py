from stylefold.embedding.embedder import embed_declaration, embed_selector, text_to_vectors
from stylefold.embedding.graph_builder import build_graph, embed_stylesheet
from stylefold.embedding.hashing import string_hash

__all__ = [
    "string_hash",
    "embed_selector",
    "embed_declaration",
    "text_to_vectors",
    "embed_stylesheet",
    "build_graph",
]
