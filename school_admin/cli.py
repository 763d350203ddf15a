#!/usr/bin/env python
"""
Command-line front-end for the school administration screens.

Examples:
    school-admin list fee-collections --search stu001 --filter month=March
    school-admin create exams --set class="Class 5" --set exam="Mid Term" --toggle subjects=Mathematics
    school-admin update results R1 --mark Mathematics=95 --calculate-total
    school-admin delete custom-fees STU001 FEE-TUITION
    school-admin verify u-student
    school-admin dashboard grades --search alice
    school-admin options fee-collections
    school-admin serve-mock
"""

import argparse
import asyncio
import sys
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import httpx
from pydantic import ValidationError

from school_admin.config.settings import Settings, get_settings
from school_admin.core.crud_controller import CrudController
from school_admin.core.form_state import FieldLockedError
from school_admin.core.notifications import Notification, Notifier
from school_admin.dashboards import sample_data
from school_admin.dashboards import service as dashboards
from school_admin.fees.screens import total_amount
from school_admin.results.screen import ResultController
from school_admin.screens import SCREENS, ScreenEntry
from school_admin.services.api_service import APIService
from school_admin.users.screen import UserController
from school_admin.utils.formatting import format_currency, format_number

InputFunc = Callable[[str], str]


def _pair(text: str) -> Tuple[str, str]:
    if "=" not in text:
        raise argparse.ArgumentTypeError(f"expected field=value, got '{text}'")
    field, value = text.split("=", 1)
    return field.strip(), value


def _filter_value(value: str) -> Any:
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    return value


def render_table(headers: Sequence[str], rows: List[Sequence[str]]) -> str:
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]
    lines = ["  ".join(h.ljust(w) for h, w in zip(headers, widths))]
    lines.append("  ".join("-" * w for w in widths))
    lines.extend("  ".join(cell.ljust(w) for cell, w in zip(row, widths)) for row in rows)
    return "\n".join(lines)


def print_notification(notification: Notification) -> None:
    stream = sys.stderr if notification.is_error else sys.stdout
    print(f"[{notification.title}] {notification.description}", file=stream)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="school-admin", description="School administration screens")
    parser.add_argument("--backend-url", help="Override BACKEND_URL for this invocation")
    commands = parser.add_subparsers(dest="command", required=True)
    screen_names = sorted(SCREENS)

    list_cmd = commands.add_parser("list", help="Show a screen's table")
    list_cmd.add_argument("screen", choices=screen_names)
    list_cmd.add_argument("--search", default="", help="Case-insensitive text search")
    list_cmd.add_argument("--filter", dest="filters", type=_pair, action="append", default=[],
                          help="Exact-match filter, field=value (repeatable)")

    def add_draft_options(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("--set", dest="sets", type=_pair, action="append", default=[],
                         help="Set a draft field, field=value (dotted paths reach nested fields)")
        cmd.add_argument("--toggle", dest="toggles", type=_pair, action="append", default=[],
                         help="Toggle a value in a multi-select field, field=value")
        cmd.add_argument("--mark", dest="marks", type=_pair, action="append", default=[],
                         help="Results only: subject=mark")
        cmd.add_argument("--calculate-total", action="store_true", help="Results only: sum the marks into total")

    create_cmd = commands.add_parser("create", help="Create a record")
    create_cmd.add_argument("screen", choices=screen_names)
    add_draft_options(create_cmd)

    update_cmd = commands.add_parser("update", help="Edit an existing record")
    update_cmd.add_argument("screen", choices=screen_names)
    update_cmd.add_argument("key", nargs="+", help="Record key (composite keys: every part, in order)")
    add_draft_options(update_cmd)

    delete_cmd = commands.add_parser("delete", help="Delete a record")
    delete_cmd.add_argument("screen", choices=screen_names)
    delete_cmd.add_argument("key", nargs="+")
    delete_cmd.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    verify_cmd = commands.add_parser("verify", help="Toggle a user's verified flag")
    verify_cmd.add_argument("user_id")

    dash_cmd = commands.add_parser("dashboard", help="Show an informational dashboard")
    dash_cmd.add_argument("name", choices=["home", "students", "teachers", "classes", "attendance", "grades"])
    dash_cmd.add_argument("--search", default="")
    dash_cmd.add_argument("--class", dest="class_name", default="")
    dash_cmd.add_argument("--subject", default="")
    dash_cmd.add_argument("--date", type=date.fromisoformat, default=None)

    options_cmd = commands.add_parser("options", help="Show the choices offered for a screen's fields")
    options_cmd.add_argument("screen", choices=screen_names)

    commands.add_parser("serve-mock", help="Run the in-memory mock backend")
    return parser


class AdminApp:
    """Wires settings, the API service and notifications for one CLI invocation."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None,
                 input_func: InputFunc = input):
        self.settings = settings
        self.api = APIService(settings, transport=transport)
        self.notifier = Notifier()
        self.notifier.subscribe(print_notification)
        self.input_func = input_func
        self.assume_yes = False

    def confirm(self, message: str) -> bool:
        if self.assume_yes:
            return True
        return self.input_func(f"{message} [y/N] ").strip().lower() in ("y", "yes")

    def controller(self, entry: ScreenEntry) -> CrudController:
        return entry.controller_class(entry.spec, self.api, self.notifier, self.confirm)

    def _key(self, controller: CrudController, parts: List[str]):
        expected = len(controller.spec.key_fields)
        if len(parts) != expected:
            raise ValueError(f"{controller.spec.title} records are identified by {expected} key part(s)")
        return tuple(parts) if expected > 1 else parts[0]

    async def list(self, args) -> int:
        entry = SCREENS[args.screen]
        controller = self.controller(entry)
        if not await controller.load():
            return 1
        filters: Dict[str, Any] = {field: _filter_value(value) for field, value in args.filters}
        if isinstance(controller, UserController):
            # role=... and status=... are the user screen's own selectors
            unknown = set(filters) - {"role", "status"}
            if unknown:
                raise ValueError(f"Unknown filter(s): {', '.join(sorted(unknown))}")
            rows = controller.visible(args.search, **filters)
        else:
            model = entry.spec.record_model
            rows = controller.visible(args.search, **{model.field_name(f): v for f, v in filters.items()})
        print(entry.spec.title)
        print(render_table([h for h, _ in entry.columns],
                           [[fn(r, self.settings) for _, fn in entry.columns] for r in rows]))
        if args.screen == "fee-collections":
            print(f"Total: {format_currency(total_amount(rows), self.settings.CURRENCY_SYMBOL)}")
        return 0

    def _apply_draft_options(self, controller: CrudController, args) -> None:
        for field, value in args.sets:
            controller.form.set(field, value)
        for field, value in args.toggles:
            controller.form.toggle(field, value)
        if args.marks or args.calculate_total:
            if not isinstance(controller, ResultController):
                raise ValueError("--mark and --calculate-total only apply to results")
            for subject, mark in args.marks:
                controller.set_mark(subject, float(mark))
            if args.calculate_total:
                print(f"Total: {controller.calculate_total()}")

    async def save(self, args, editing: bool) -> int:
        entry = SCREENS[args.screen]
        controller = self.controller(entry)
        if not await controller.load():
            return 1
        if editing:
            record = controller.find(self._key(controller, args.key))
            if record is None:
                print(f"No {entry.spec.noun} with key {' / '.join(args.key)}", file=sys.stderr)
                return 1
            controller.open_for_edit(record)
        else:
            controller.open_for_create()
        try:
            self._apply_draft_options(controller, args)
        except (FieldLockedError, KeyError, ValueError, ValidationError) as e:
            print(f"Invalid input: {e}", file=sys.stderr)
            controller.cancel()
            return 2
        return 0 if await controller.submit() else 1

    async def delete(self, args) -> int:
        entry = SCREENS[args.screen]
        controller = self.controller(entry)
        self.assume_yes = args.yes
        if not await controller.load():
            return 1
        record = controller.find(self._key(controller, args.key))
        if record is None:
            print(f"No {entry.spec.noun} with key {' / '.join(args.key)}", file=sys.stderr)
            return 1
        deleted = await controller.delete(record)
        return 0 if deleted else 1

    async def verify(self, args) -> int:
        entry = SCREENS["users"]
        controller = self.controller(entry)
        if not await controller.load():
            return 1
        user = controller.find(args.user_id)
        if user is None:
            print(f"No user with id {args.user_id}", file=sys.stderr)
            return 1
        return 0 if await controller.toggle_verified(user) else 1

    def options(self, args) -> int:
        choices = SCREENS[args.screen].choices()
        if not choices:
            print(f"{SCREENS[args.screen].spec.title} has no fixed choices")
        for name, values in choices.items():
            print(f"{name}: {', '.join(values)}")
        return 0

    async def dashboard(self, args) -> int:
        service = dashboards.DashboardService(self.api, self.settings)
        if args.name == "home":
            cards = dashboards.home_cards(await service.stats())
            for card in cards:
                trend = f"  ({'+' if card.trend.is_positive else ''}{card.trend.value})" if card.trend else ""
                print(f"{card.title}: {card.value} - {card.description}{trend}")
            print("\nRecent Activity")
            for item in sample_data.RECENT_ACTIVITY:
                print(f"- {item['activity']} ({item['time']})")
            return 0
        if args.name == "students":
            rows = dashboards.STUDENT_SEARCH.apply(await service.students(), args.search)
            table = [[s.name, s.email, s.class_name, s.grade, s.status] for s in rows]
            print(render_table(["Name", "Email", "Class", "Grade", "Status"], table))
        elif args.name == "teachers":
            rows = dashboards.TEACHER_SEARCH.apply(await service.teachers(), args.search)
            table = [[t.name, t.subject, t.department, t.status, ", ".join(t.classes)] for t in rows]
            print(render_table(["Name", "Subject", "Department", "Status", "Classes"], table))
        elif args.name == "classes":
            rows = dashboards.CLASS_SEARCH.apply(await service.classes(), args.search)
            table = [[c.code, c.name, c.teacher, f"{c.students}/{c.capacity} ({c.enrollment_percent:.0f}%)", c.status]
                     for c in rows]
            print(render_table(["Code", "Name", "Teacher", "Enrollment", "Status"], table))
        elif args.name == "attendance":
            rows = dashboards.ATTENDANCE_SEARCH.apply(await service.attendance(args.date, args.class_name), args.search)
            stats = dashboards.attendance_stats(rows)
            table = [[r.student_name, r.student_id, r.class_name, r.status, r.time] for r in rows]
            print(render_table(["Student", "ID", "Class", "Status", "Time"], table))
            print(f"Present: {stats.present}  Absent: {stats.absent}  Late: {stats.late}  Total: {stats.total}")
        else:
            rows = dashboards.GRADE_SEARCH.apply(await service.grades(args.class_name, args.subject), args.search)
            stats = dashboards.grade_stats(rows)
            table = [[g.student_name, g.subject, g.assignment, g.letter_grade,
                      f"{format_number(g.grade)}/{format_number(g.max_grade)} ({format_number(g.percentage)}%)",
                      dashboards.grade_band(g.percentage)] for g in rows]
            print(render_table(["Student", "Subject", "Assignment", "Letter", "Score", "Band"], table))
            print(f"Average: {stats.average}%  Highest: {format_number(stats.highest)}%  "
                  f"Lowest: {format_number(stats.lowest)}%  Total: {stats.total}")
        return 0

    async def run(self, args) -> int:
        if args.command == "list":
            return await self.list(args)
        if args.command == "create":
            return await self.save(args, editing=False)
        if args.command == "update":
            return await self.save(args, editing=True)
        if args.command == "delete":
            return await self.delete(args)
        if args.command == "verify":
            return await self.verify(args)
        if args.command == "options":
            return self.options(args)
        return await self.dashboard(args)


def main(argv: Optional[Sequence[str]] = None, transport: Optional[httpx.AsyncBaseTransport] = None,
         input_func: InputFunc = input, settings: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    if args.backend_url:
        settings = settings.model_copy(update={"BACKEND_URL": args.backend_url})

    if args.command == "serve-mock":
        from school_admin.mock_backend.main import serve
        serve(settings)
        return 0

    app = AdminApp(settings, transport=transport, input_func=input_func)
    try:
        return asyncio.run(app.run(args))
    except (KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
