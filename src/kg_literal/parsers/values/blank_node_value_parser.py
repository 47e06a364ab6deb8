from kg_literal.models.datatypes import Datatype
from kg_literal.models.literal import Literal


def parse_blank_node_value(data_type: Datatype, text: str) -> Literal:
    return Literal.new_blank_node(text, data_type)
