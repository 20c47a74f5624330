from skate.reader.parser import (
    parse,
    parse_atom,
    parse_sequence,
    read_all,
    read_top_level,
    tokenize,
)
