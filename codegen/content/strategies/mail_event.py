from codegen.generation.context import GenerationContext
from codegen.generation.fields import FieldTable, enclose_in_single_quotes as q

MAIL_EVENT_FIELDS: FieldTable = (
    ("EVENT_NAME", q("_event_name_")),
    ("LID", q("ru")),
    ("NAME", q("_name_")),
    ("DESCRIPTION", q("_descr_")),
    ("SORT", "150"),
)

MAIL_TEMPLATE_FIELDS: FieldTable = (
    ("EVENT_NAME", q("_event_name_")),
    ("LID", q("_SID_")),
    ("ACTIVE", q("Y")),
    ("EMAIL_FROM", q("#DEFAULT_EMAIL_FROM#")),
    ("EMAIL_TO", q("#EMAIL_TO#")),
    ("SUBJECT", q("#SUBJECT#")),
    ("BODY_TYPE", q("text")),
    ("MESSAGE", q("Message here with #MACROS#")),
)


def generate_mail_event(ctx: GenerationContext) -> str:
    """Script adding a mail event type and, on success, its mail template.

    The template block lives inside the `if ($r)` branch, so it is written one
    indent level deeper than the event block.
    """
    return (
        ctx.lines(["php", "bxheader", "mevent_obj", "mevent_data_st"])
        + ctx.fields(MAIL_EVENT_FIELDS)
        + ctx.lines(["mevent_data_en", "mevent_run", "mevent_run_check", "mevent_succ"])
        + ctx.lines(["mtpl_obj", "mtpl_data_st", "mtpl_warn"], prefix=ctx.indent)
        + ctx.fields(MAIL_TEMPLATE_FIELDS, depth=2)
        + ctx.lines(["mtpl_data_en", "mtpl_run"], prefix=ctx.indent)
        + ctx.lines(["mtpl_run_check", "mevent_run_check_else", "done"])
    )
