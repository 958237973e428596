"""Command-line entry point: menus, problems, games and learning statistics."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator
from contextlib import closing
from datetime import datetime
from pathlib import Path

import pymysql

from chimielab import problems, stats
from chimielab.atom_game import AtomQuiz
from chimielab.menus import MENUS, manual_path
from chimielab.periodic import (
    ELEMENTS_FILE,
    UnknownElementError,
    element_message,
    load_elements,
    table_cells,
)
from chimielab.separation import SeparationQuiz

_QUIT = {"", "q", "iesire", "ieșire"}


def _lines() -> Iterator[str]:
    for line in sys.stdin:
        yield line.strip()


def _err(message: str) -> None:
    print(message, file=sys.stderr)


def _cmd_menu(args: argparse.Namespace) -> int:
    title, items = MENUS[args.name]
    print(title)
    for number, item in enumerate(items, start=1):
        suffix = f"  [{item.command}]" if item.command else ""
        print(f"{number}. {item.label}{suffix}")
    return 0


def _cmd_molar(args: argparse.Namespace) -> int:
    moles = problems.parse_number(args.moles)
    volume = problems.parse_number(args.volume)
    print(problems.explain_molar_concentration(moles, volume), end="")
    return 0


def _cmd_solution_mass(args: argparse.Namespace) -> int:
    mass = problems.parse_number(args.solute_mass)
    concentration = problems.parse_number(args.concentration)
    explain = (
        problems.explain_solution_mass_brief if args.brief else problems.explain_solution_mass
    )
    print(explain(mass, concentration), end="")
    return 0


def _cmd_solute_mass(args: argparse.Namespace) -> int:
    molarity = problems.parse_number(args.molarity)
    volume = problems.parse_number(args.volume)
    print(problems.explain_solute_mass(molarity, volume), end="")
    return 0


def _cmd_check_percent(args: argparse.Namespace) -> int:
    if args.show:
        print(problems.PERCENT_SOLUTION)
        return 0
    print(problems.PERCENT_EXERCISE)
    ok = problems.check_percent_answer(" ".join(args.answer))
    print(problems.PERCENT_CORRECT if ok else problems.PERCENT_WRONG)
    return 0 if ok else 2


def _cmd_table(args: argparse.Namespace) -> int:
    for row in table_cells():
        print(" ".join(f"{cell:<2}" if cell else "  " for cell in row).rstrip())
    return 0


def _cmd_element(args: argparse.Namespace) -> int:
    data = load_elements(args.data)
    title, text = element_message(data, args.symbol)
    print(title)
    print(text)
    return 0


def _cmd_manual(args: argparse.Namespace) -> int:
    print(manual_path(args.dir))
    return 0


def _cmd_atom(args: argparse.Namespace) -> int:
    quiz = AtomQuiz(random.Random(args.seed))
    print(quiz.label)
    for command in _lines():
        if command.lower() in _QUIT:
            break
        if command == "nou":
            quiz.new_atom()
            print(quiz.label)
            continue
        if command == "ajutor":
            print(quiz.hint())
            continue
        parts = command.split()
        if len(parts) != 3:
            _err("Introduceți valori numerice corecte!")
            continue
        try:
            print(quiz.check_text(*parts))
        except ValueError as exc:
            _err(str(exc))
    return 0


def _show_spin(quiz: SeparationQuiz) -> list[str]:
    options = quiz.spin()
    print(quiz.mixture_text)
    for number, option in enumerate(options, start=1):
        print(f"{number}. {option}")
    return options


def _cmd_separation(args: argparse.Namespace) -> int:
    quiz = SeparationQuiz(random.Random(args.seed))
    options = _show_spin(quiz)
    for command in _lines():
        if command.lower() in _QUIT:
            break
        choice = command
        if command.isdigit() and 1 <= int(command) <= len(options):
            choice = options[int(command) - 1]
        quiz.answer(choice)
        print(quiz.result_text)
        options = _show_spin(quiz)
    return 0


def _open(args: argparse.Namespace):
    return stats.connect(host=args.host, port=args.port, database=args.database)


def _cmd_dashboard(args: argparse.Namespace) -> int:
    try:
        with closing(_open(args)) as connection:
            store = stats.LearningStore(connection)
            print(store.summary_text(args.username))
            for date, grade in store.grade_history(args.username):
                print(f"{date}  {grade}")
    except pymysql.MySQLError as exc:
        _err(f"Eroare MySQL: {exc}")
        return 1
    return 0


def _cmd_grades(args: argparse.Namespace) -> int:
    try:
        with closing(_open(args)) as connection:
            store = stats.LearningStore(connection)
            for test, title in (("Test1", "Testul 1"), ("Test2", "Testul 2")):
                print(title)
                for grade, date in store.grades_for_test(args.username, test):
                    print(f"  {grade}  {date}")
    except pymysql.MySQLError as exc:
        _err(f"Eroare BD: {exc}")
        return 1
    return 0


def _add_db_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--host", default=stats.DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=stats.DEFAULT_PORT)
    parser.add_argument("--database", default=stats.DEFAULT_DATABASE)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chimielab", description=MENUS["main"][0])
    parser.add_argument("--user", help="utilizatorul pentru care se salvează sesiunea")
    parser.add_argument(
        "--record", action="store_true", help="salvează durata sesiunii în baza de date"
    )
    _add_db_options(parser)
    parser.set_defaults(handler=_cmd_menu, name="main")
    sub = parser.add_subparsers(dest="command")

    menu = sub.add_parser("menu", help="afișează un meniu")
    menu.add_argument("name", nargs="?", default="main", choices=sorted(MENUS))
    menu.set_defaults(handler=_cmd_menu)

    molar = sub.add_parser("molar", help="concentrația molară")
    molar.add_argument("moles")
    molar.add_argument("volume")
    molar.set_defaults(handler=_cmd_molar)

    sol = sub.add_parser("solution-mass", help="masa soluției")
    sol.add_argument("solute_mass")
    sol.add_argument("concentration")
    sol.add_argument("--brief", action="store_true")
    sol.set_defaults(handler=_cmd_solution_mass)

    solute = sub.add_parser("solute-mass", help="masa substanței (NaCl)")
    solute.add_argument("molarity")
    solute.add_argument("volume")
    solute.set_defaults(handler=_cmd_solute_mass)

    percent = sub.add_parser("check-percent", help="exercițiul ghidat de concentrație")
    percent.add_argument("answer", nargs="*")
    percent.add_argument("--show", action="store_true", help="arată rezolvarea")
    percent.set_defaults(handler=_cmd_check_percent)

    table = sub.add_parser("table", help="tabelul periodic")
    table.set_defaults(handler=_cmd_table)

    element = sub.add_parser("element", help="informații despre un element")
    element.add_argument("symbol")
    element.add_argument("--data", type=Path, default=Path(ELEMENTS_FILE))
    element.set_defaults(handler=_cmd_element)

    manual = sub.add_parser("manual", help="calea manualului PDF")
    manual.add_argument("--dir", type=Path, default=Path.cwd())
    manual.set_defaults(handler=_cmd_manual)

    for name, handler, text in (
        ("atom", _cmd_atom, "jocul structurii atomului"),
        ("separation", _cmd_separation, "separarea amestecurilor"),
    ):
        game = sub.add_parser(name, help=text)
        game.add_argument("--seed", type=int, default=None)
        game.set_defaults(handler=handler)

    for name, handler, text in (
        ("dashboard", _cmd_dashboard, "statistici de învățare"),
        ("grades", _cmd_grades, "catalogul notelor"),
    ):
        db = sub.add_parser(name, help=text)
        db.add_argument("username")
        _add_db_options(db)
        db.set_defaults(handler=handler)

    return parser


def _record(args: argparse.Namespace, start: datetime) -> None:
    try:
        with closing(_open(args)) as connection:
            stats.LearningStore(connection).record_session(args.user, start, datetime.now())
    except pymysql.MySQLError as exc:
        _err(f"Eroare la salvarea timpului: {exc}")


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.record and not args.user:
        parser.error("--record necesită --user")
    start = datetime.now()
    try:
        code = args.handler(args)
    except (ValueError, FileNotFoundError, UnknownElementError) as exc:
        _err(str(exc))
        code = 1
    if args.record:
        _record(args, start)
    return code


if __name__ == "__main__":
    sys.exit(main())