from minischeme.reader.parser import lex, TokenStream, parse, parse_one

__all__ = ["lex", "TokenStream", "parse", "parse_one"]
