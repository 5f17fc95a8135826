from .pdb_parser import ParserState, finish, parse_pdb, step

__all__ = ["ParserState", "finish", "parse_pdb", "step"]
