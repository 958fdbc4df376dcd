from codegen.generation.context import GenerationContext
from codegen.generation.fields import FieldTable, enclose_in_single_quotes as q

IBLOCK_PROPERTY_FIELDS: FieldTable = (
    ("IBLOCK_ID", q("_0_")),
    ("NAME", q("_name_")),
    ("ACTIVE", q("Y")),
    ("SORT", "500"),
    ("CODE", q("_code_")),
    ("ROW_COUNT", "1"),
    ("COL_COUNT", "30"),
    ("XML_ID", q("")),
    ("DEFAULT_VALUE", q("")),
    ("PROPERTY_TYPE", q("S")),
    ("LIST_TYPE", q("C")),
    ("LINK_IBLOCK_ID", q("0")),
    ("MULTIPLE", q("N")),
    ("WITH_DESCRIPTION", q("N")),
    ("SEARCHABLE", q("N")),
    ("FILTRABLE", q("N")),
    ("IS_REQUIRED", q("N")),
    # filled in by Bitrix itself
    ("VERSION", "2"),
    ("USER_TYPE", "false"),
    ("USER_TYPE_SETTINGS", "false"),
    ("HINT", q("")),
)


def generate_iblock_property(ctx: GenerationContext) -> str:
    return (
        ctx.lines(["php", "bxheader", "iblock", "ibp_obj", "iblock_prop_st"])
        + ctx.fields(IBLOCK_PROPERTY_FIELDS)
        + ctx.lines(["iblock_prop_en", "iblock_prop_run", "iblock_prop_check", "done"])
    )
