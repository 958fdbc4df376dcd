from codegen.codegen import Codegen
from codegen.content.snippets import add_default_snippets
from codegen.content.strategies.iblock_property import generate_iblock_property
from codegen.content.strategies.mail_event import generate_mail_event
from codegen.content.strategies.user_field import generate_user_field
from codegen.core.config import Settings, get_settings


def register_default_generators(codegen: Codegen) -> None:
    codegen.register_generator("uf", generate_user_field)
    codegen.register_generator("ibprop", generate_iblock_property)
    codegen.register_generator("mevent", generate_mail_event)


def build_codegen(settings: Settings | None = None) -> Codegen:
    settings = settings or get_settings()
    codegen = Codegen(line_break=settings.line_break, indent=settings.indent)
    if settings.load_defaults:
        codegen.load(add_default_snippets, register_default_generators)
    return codegen
