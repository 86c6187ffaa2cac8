import sys
import argparse
import logging

from langedit_logger import get_logger, set_console_level
logger = get_logger("main")

from PySide6.QtCore import QCoreApplication

import langedit_config as config
from langedit_settings import load_settings, save_settings, remember_recent_file
import locales
from locales import tr
from controllers.translation_manager import TranslationManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="langedit",
        description=tr("cli_description"),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.VERSION}")
    parser.add_argument(
        "--ui-lang",
        default=None,
        choices=sorted(locales.SUPPORTED_UI_LANGUAGES),
        help="UI language for messages (defaults to the saved setting)."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show log output on the console.")

    commands = parser.add_subparsers(dest="command", required=True)

    info = commands.add_parser("info", help="Show groups and translation progress of a language file.")
    info.add_argument("lang_file")

    export_eng = commands.add_parser("export-eng", help="Write all English phrases to a text file.")
    export_eng.add_argument("lang_file")
    export_eng.add_argument("text_file")

    export_alt = commands.add_parser("export-alt", help="Write all alternative phrases to a text file.")
    export_alt.add_argument("lang_file")
    export_alt.add_argument("text_file")

    import_alt = commands.add_parser(
        "import-alt",
        help="Replace alternative phrases line by line from a text file (order sensitive)."
    )
    import_alt.add_argument("lang_file")
    import_alt.add_argument("text_file")
    import_alt.add_argument("-o", "--output", default=None, help="Save to this file instead of lang_file.")

    add_phrases = commands.add_parser("add-phrases", help="Add the lines of a text file to a group as new phrases.")
    add_phrases.add_argument("lang_file")
    add_phrases.add_argument("text_file")
    add_phrases.add_argument("-g", "--group", required=True)
    add_phrases.add_argument("-o", "--output", default=None, help="Save to this file instead of lang_file.")

    merge = commands.add_parser("merge", help="Add phrases that exist only in another language file.")
    merge.add_argument("lang_file")
    merge.add_argument("other_file")
    merge.add_argument("-o", "--output", default=None, help="Save to this file instead of lang_file.")

    template = commands.add_parser("template", help="Write a new language file with alternatives set to English.")
    template.add_argument("lang_file")
    template.add_argument("output")

    return parser


def _print_info(manager: TranslationManager):
    store = manager.store
    print(tr("cli_loaded", name=manager.display_name, groups=store.group_count,
             phrases=store.phrase_count, untranslated=store.untranslated_count()))
    for group, phrases in store.groups():
        print(tr("cli_group_line", group=group, phrases=len(phrases),
                 untranslated=store.untranslated_count(group)))


def run_command(args, manager: TranslationManager) -> bool:
    """Execute one sub-command. Returns False when an operation failed."""
    if not manager.load_translation(args.lang_file):
        return False

    command = args.command
    if command == "info":
        _print_info(manager)
        return True

    if command == "export-eng":
        result = manager.export_english_phrases(args.text_file)
    elif command == "export-alt":
        result = manager.export_alternative_phrases(args.text_file)
    elif command == "template":
        result = manager.export_new_english_phrases(args.output)
    else:
        if command == "import-alt":
            result = manager.import_alternative_text_file(args.text_file)
        elif command == "add-phrases":
            result = manager.import_new_phrases_from_text_file(args.text_file, args.group)
        else:
            result = manager.import_new_phrases_from_lang_file(args.other_file)
            print(tr("cli_merged" if result.value else "cli_nothing_merged", path=args.other_file))
        if not result:
            return False
        result = manager.save_translation(args.output)

    if result:
        # Export commands return a line count, save operations the written path.
        written = args.text_file if command in ("export-eng", "export-alt") else result.value
        print(tr("cli_written", path=written))
    return bool(result)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    set_console_level(logging.DEBUG if args.verbose else logging.CRITICAL)

    settings = load_settings()
    locales.set_language(args.ui_lang or settings.get("ui_language", config.DEFAULT_UI_LANGUAGE))

    # Signals need a core application instance; no event loop is run.
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    logger.debug(f"Using {type(app).__name__}")

    manager = TranslationManager()
    errors = []

    def on_execution_error(message):
        errors.append(message)
        print(message, file=sys.stderr)

    manager.execution_error.connect(on_execution_error)

    ok = run_command(args, manager)

    if manager.file_path:
        save_settings(remember_recent_file(settings, manager.file_path))

    logger.info(f"Command '{args.command}' finished ({'ok' if ok and not errors else 'failed'})")
    return 0 if ok and not errors else 1


if __name__ == "__main__":
    sys.exit(main())
