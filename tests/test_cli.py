import httpx
import pytest

from school_admin.cli import build_parser, main, render_table


@pytest.fixture()
def run_cli(settings, transport):
    def _run(*argv, answer="n"):
        prompts = []

        def input_func(prompt):
            prompts.append(prompt)
            return answer

        code = main(list(argv), transport=transport, input_func=input_func, settings=settings)
        return code, prompts
    return _run


def test_list_prints_the_screen_table(run_cli, capsys):
    code, _ = run_cli("list", "exams")

    out = capsys.readouterr().out
    assert code == 0
    assert "Exam Configurations" in out
    assert "E1" in out and "Mathematics, English" in out


def test_list_search_and_filter(run_cli, capsys):
    run_cli("list", "exams", "--search", "class 9")
    out = capsys.readouterr().out
    assert "E2" in out and "E1" not in out

    run_cli("list", "exams", "--filter", "class=Class 5")
    out = capsys.readouterr().out
    assert "E1" in out and "E2" not in out


def test_fee_collection_list_shows_the_total(run_cli, capsys):
    run_cli("list", "fee-collections", "--filter", "month=March")

    assert "Total: ৳1500" in capsys.readouterr().out


def test_users_list_uses_role_and_status(run_cli, capsys):
    run_cli("list", "users", "--filter", "status=verified", "--filter", "role=staff")

    out = capsys.readouterr().out
    assert "karim@school.edu" in out
    assert "alice@email.com" not in out


def test_create_reports_success(run_cli, store, capsys):
    code, _ = run_cli("create", "exams", "--set", "class=Class 7", "--set", "exam=Unit Test",
                      "--toggle", "subjects=Science")

    assert code == 0
    assert "[Success] Exam configuration created successfully" in capsys.readouterr().out
    assert len(store["exam-configs"].all()) == 3


def test_create_with_missing_fields_is_rejected(run_cli, store, capsys):
    code, _ = run_cli("create", "exams", "--set", "class=Class 7")

    assert code == 1
    assert "[Error] Please fill all required fields" in capsys.readouterr().err
    assert len(store["exam-configs"].all()) == 2


def test_locked_key_edit_is_an_input_error(run_cli, capsys):
    code, _ = run_cli("update", "custom-fees", "STU001", "FEE-TUITION", "--set", "feeId=FEE-BUS")

    assert code == 2
    assert "Invalid input" in capsys.readouterr().err


def test_wrong_number_of_key_parts(run_cli):
    code, _ = run_cli("update", "custom-fees", "STU001", "--set", "newAmount=10")

    assert code == 2


def test_marks_only_apply_to_results(run_cli):
    code, _ = run_cli("update", "exams", "E1", "--mark", "Mathematics=90")

    assert code == 2


def test_update_results_with_calculated_total(run_cli, store, capsys):
    code, _ = run_cli("update", "results", "R1", "--mark", "Mathematics=100", "--calculate-total")

    assert code == 0
    assert "Total: 181" in capsys.readouterr().out
    assert store["results"].get(("R1",))["total"] == "181"


def test_update_unknown_record(run_cli, capsys):
    code, _ = run_cli("update", "exams", "E404", "--set", "exam=Final Term")

    assert code == 1
    assert "No exam configuration with key E404" in capsys.readouterr().err


def test_delete_asks_and_respects_no(run_cli, store):
    code, prompts = run_cli("delete", "exams", "E2", answer="n")

    assert code == 1
    assert prompts == ["Are you sure you want to delete this exam configuration? [y/N] "]
    assert len(store["exam-configs"].all()) == 2


def test_delete_confirmed(run_cli, store):
    code, _ = run_cli("delete", "custom-fees", "STU001", "FEE-TUITION", answer="y")

    assert code == 0
    assert store["custom-student-fees"].all() == []


def test_delete_with_yes_skips_the_prompt(run_cli, store):
    code, prompts = run_cli("delete", "exams", "E2", "--yes")

    assert code == 0
    assert prompts == []
    assert [r["id"] for r in store["exam-configs"].all()] == ["E1"]


def test_verify_toggles_the_flag(run_cli, store, capsys):
    code, _ = run_cli("verify", "u-student")

    assert code == 0
    assert store["users"].get(("u-student",))["verified"] is True
    assert "User verified successfully" in capsys.readouterr().out


def test_backend_failure_exits_non_zero(settings, capsys):
    transport = httpx.MockTransport(lambda request: httpx.Response(500))

    code = main(["list", "results"], transport=transport, settings=settings)

    assert code == 1
    assert "[Error] Failed to fetch results" in capsys.readouterr().err


def test_dashboard_grades(run_cli, capsys):
    code, _ = run_cli("dashboard", "grades", "--search", "alice")

    out = capsys.readouterr().out
    assert code == 0
    assert "Alice Johnson" in out and "Bob Smith" not in out
    assert "Highest: 92%" in out


def test_dashboard_home(run_cli, capsys):
    run_cli("dashboard", "home")

    out = capsys.readouterr().out
    assert "Total Students: 1247" in out
    assert "Average Grade: 87.5/100" in out
    assert "- New student enrollment (2 hours ago)" in out


def test_parser_rejects_malformed_pairs():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["list", "exams", "--filter", "month"])


def test_render_table_pads_columns():
    assert render_table(["A", "Name"], [["1", "x"], ["22", "yy"]]).splitlines() == [
        "A   Name",
        "--  ----",
        "1   x   ",
        "22  yy  ",
    ]


def test_options_lists_field_choices(run_cli, capsys):
    code, _ = run_cli("options", "fee-collections")

    out = capsys.readouterr().out
    assert code == 0
    assert "paymentMethod: Cash, Bank Transfer, Mobile Banking, Card Payment, Cheque" in out
    assert "month: January" in out


def test_options_for_screen_without_choices(run_cli, capsys):
    run_cli("options", "custom-fees")

    assert "Custom Student Fees has no fixed choices" in capsys.readouterr().out


def test_unknown_user_filter_is_an_input_error(run_cli):
    code, _ = run_cli("list", "users", "--filter", "verified=true")

    assert code == 2


def test_malformed_collection_exits_non_zero(settings, capsys):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"configs": True}))

    code = main(["list", "exams"], transport=transport, settings=settings)

    assert code == 1
    assert "[Error] Failed to fetch exam configurations" in capsys.readouterr().err
