import asyncio

from school_admin.results.screen import RESULT_SCREEN, ResultController


def _controller(api, notifier):
    controller = ResultController(RESULT_SCREEN, api, notifier)
    asyncio.run(controller.load())
    return controller


def test_calculate_total_sums_the_marks(api, notifier):
    controller = _controller(api, notifier)
    controller.open_for_create()

    controller.set_mark("Mathematics", 95)
    controller.set_mark("English", 80.5)

    assert controller.calculate_total() == "175.5"
    assert controller.form.draft.total == "175.5"


def test_total_is_not_kept_in_sync_after_later_mark_changes(api, notifier, store):
    """The stored total is whatever was last calculated, even if marks changed since."""
    controller = _controller(api, notifier)
    controller.open_for_edit(controller.find("R1"))

    controller.set_mark("Mathematics", 100)
    assert controller.calculate_total() == "181"
    controller.set_mark("English", 90)

    assert asyncio.run(controller.submit()) is True
    saved = store["results"].get(("R1",))
    assert saved["total"] == "181"
    assert saved["subjects"] == {"Mathematics": 100, "English": 90}


def test_result_requires_identity_fields(api, notifier):
    controller = _controller(api, notifier)
    controller.open_for_create()
    controller.set_mark("Science", 70)

    assert asyncio.run(controller.submit()) is False
    assert controller.form.draft.problems() == [
        "studentId is required", "studentName is required", "class is required", "exam is required",
    ]


def test_result_search_and_filters(api, notifier):
    controller = _controller(api, notifier)

    assert [r.id for r in controller.visible("alice")] == ["R1"]
    assert [r.id for r in controller.visible("stu001", class_name="Class 5", exam="Mid Term")] == ["R1"]
    assert controller.visible(exam="Final Term") == []
