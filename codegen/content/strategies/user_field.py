from codegen.generation.context import GenerationContext
from codegen.generation.fields import FieldTable, enclose_in_single_quotes as q

_LABEL = "array('ru' => '', 'en' => '')"

USER_FIELD_FIELDS: FieldTable = (
    ("ENTITY_ID", q("")),
    ("FIELD_NAME", q("_field_name_")),
    ("SORT", "500"),
    ("XML_ID", q("")),
    ("USER_TYPE_ID", q("string")),
    ("SHOW_FILTER", q("N")),
    ("MULTIPLE", q("N")),
    ("MANDATORY", q("N")),
    ("SHOW_IN_LIST", q("N")),
    ("EDIT_IN_LIST", q("N")),
    ("IS_SEARCHABLE", q("N")),
    ("EDIT_FORM_LABEL", _LABEL),
    ("LIST_COLUMN_LABEL", _LABEL),
    ("LIST_FILTER_LABEL", _LABEL),
    ("ERROR_MESSAGE", _LABEL),
    ("HELP_MESSAGE", _LABEL),
    ("SETTINGS", "array()"),
)


def generate_user_field(ctx: GenerationContext) -> str:
    """Script adding a user field through CUserTypeEntity."""
    return (
        ctx.lines(["php", "bxheader", "uf_obj", "uf_data_st"])
        + ctx.fields(USER_FIELD_FIELDS)
        + ctx.lines(["uf_data_en", "uf_data_run", "uf_data_check", "done"])
    )
