"""Default snippet catalog for Bitrix administrative scripts.

Multi-line snippets take the line break and indent of the Codegen at the
moment they are loaded; later configuration changes do not rewrite them.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codegen.codegen import Codegen


def _if_else(lb: str, ind: str, success: str, error: str) -> str:
    return (
        "if ($r) { " + lb
        + ind + success + " " + lb
        + "} else { " + lb
        + ind + error + " " + lb
        + "}"
    )


def add_default_snippets(codegen: "Codegen") -> None:
    lb, ind = codegen.line_break, codegen.indent

    # common
    codegen.add_snippet("php", "<?php")
    codegen.add_snippet("path", "$_SERVER['DOCUMENT_ROOT'] = dirname(__FILE__);")
    codegen.add_snippet(
        "bxheader",
        "require_once($_SERVER['DOCUMENT_ROOT'] . '/bitrix/modules/main/include/prolog_before.php');",
    )

    # iblock properties
    codegen.add_snippet("iblock", "\\Bitrix\\Main\\Loader::includeModule('iblock');")
    codegen.add_snippet("ibp_obj", "$ibp = new CIBlockProperty();")
    codegen.add_snippet("iblock_prop_st", "$prop = array(")
    codegen.add_snippet("iblock_prop_en", ");")
    codegen.add_snippet("iblock_prop_run", "$r = $ibp->add($prop);")
    codegen.add_snippet(
        "iblock_prop_check",
        _if_else(
            lb,
            ind,
            "echo 'Added prop with ID: ' . $r . PHP_EOL;",
            "echo 'Error adding prop: ' . $ibp->LAST_ERROR  . PHP_EOL;",
        ),
    )

    # user fields
    codegen.add_snippet("uf_obj", "$ufo = new CUserTypeEntity;")
    codegen.add_snippet("uf_data_st", "$uf = array(")
    codegen.add_snippet("uf_data_en", ");")
    codegen.add_snippet("uf_data_run", "$r = $ufo->add($uf);")
    # TODO: CUserTypeEntity has no LAST_ERROR, read the error from $APPLICATION->GetException() instead
    codegen.add_snippet(
        "uf_data_check",
        _if_else(
            lb,
            ind,
            "echo 'Added UserField with ID: ' . $r . PHP_EOL;",
            "echo 'Error adding UserField: ' . $ufo->LAST_ERROR  . PHP_EOL;",
        ),
    )

    # mail events
    codegen.add_snippet("mevent_obj", "$meo = new CEventType;")
    codegen.add_snippet("mevent_data_st", "$me = array(")
    codegen.add_snippet("mevent_data_en", ");")
    codegen.add_snippet("mevent_run", "$r = $meo->add($me);")
    codegen.add_snippet(
        "mevent_run_succ_wo_mm",
        _if_else(
            lb,
            ind,
            "echo 'Added MailEvent with ID: ' . $r . PHP_EOL;",
            "echo 'Error adding MailEvent: ' . $meo->LAST_ERROR  . PHP_EOL;",
        ),
    )
    codegen.add_snippet("mevent_run_check", "if ($r) {")
    codegen.add_snippet(
        "mevent_run_check_else",
        "} else {" + lb + ind + "echo 'Error adding MailEvent: ' . $meo->LAST_ERROR  . PHP_EOL; " + lb + "}",
    )
    codegen.add_snippet("mevent_succ", ind + "echo 'Added MailEvent with ID: ' . $r . PHP_EOL;" + lb)

    # mail templates, nested inside the mail event success branch
    codegen.add_snippet("mtpl_warn", ind + "// TODO - set proper LID for template!")
    codegen.add_snippet("mtpl_obj", "$mmo = new CEventMessage;")
    codegen.add_snippet("mtpl_data_st", "$mm = array(")
    codegen.add_snippet("mtpl_data_en", ");")
    codegen.add_snippet("mtpl_run", "$r = $mmo->add($mm);")
    codegen.add_snippet(
        "mtpl_run_check",
        ind + "if ($r) {" + lb
        + ind + ind + "echo 'Added MailTemplate with ID: ' . $r . PHP_EOL;" + lb
        + ind + "} else {" + lb
        + ind + ind + "echo 'Error adding MailTemplate: ' . $mmo->LAST_ERROR  . PHP_EOL;" + lb
        + ind + "}",
    )

    codegen.add_snippet("done", "echo 'Done!' . PHP_EOL;")
