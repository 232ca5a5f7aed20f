"""A rejected operation must leave the controller exactly as it was."""

import pytest

from tourguide import Status


def snapshot(controller):
    return {
        "mode": controller.mode,
        "tours": {tour_id: tour.to_dict() for tour_id, tour in controller.tours.items()},
        "current": controller.current_tour.to_dict() if controller.current_tour else None,
        "selected": controller.selected_tour.id if controller.selected_tour else None,
        "visited": controller.visited,
        "total": controller.total,
        "output": controller.get_output(),
    }


REJECTED_WHILE_BROWSING = [
    ("add_leg", ("leg",)),
    ("add_waypoint", ("waypoint",)),
    ("end_new_tour", ()),
    ("end_selected_tour", ()),
    ("show_tour_details", ("missing",)),
    ("follow_tour", ("missing",)),
    ("start_new_tour", ("T1", "Duplicate")),
]


@pytest.mark.parametrize("operation, args", REJECTED_WHILE_BROWSING)
def test_rejections_while_browsing(controller, add_one_point_tour, operation, args):
    add_one_point_tour()
    before = snapshot(controller)
    assert getattr(controller, operation)(*args) is Status.ERROR
    assert snapshot(controller) == before


def test_rejections_while_creating(controller):
    controller.start_new_tour("T2", "Old Town")
    controller.set_location(-500, 0)
    controller.add_waypoint("Edinburgh Castle\n")
    controller.add_leg("Royal Mile\n")
    before = snapshot(controller)

    assert controller.add_leg("Again") is Status.ERROR
    assert controller.end_new_tour() is Status.ERROR
    assert controller.start_new_tour("T3", "Other") is Status.ERROR
    controller.set_location(-490, 0)
    assert controller.add_waypoint("Gate") is Status.ERROR
    assert controller.end_selected_tour() is Status.ERROR

    after = snapshot(controller)
    assert after == before


def test_controller_usable_after_failures(controller):
    for _ in range(3):
        assert controller.end_new_tour() is Status.ERROR
    assert controller.start_new_tour("T1", "Fine") is Status.OK
    controller.set_location(0, 0)
    assert controller.add_waypoint("Here") is Status.OK
    assert controller.end_new_tour() is Status.OK


def test_status_truthiness():
    assert Status.OK
    assert not Status.ERROR
