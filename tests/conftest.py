import pytest

from tourguide import Controller, Status

WAYPOINT_RADIUS = 10.0
WAYPOINT_SEPARATION = 25.0


@pytest.fixture
def controller():
    return Controller(WAYPOINT_RADIUS, WAYPOINT_SEPARATION)


@pytest.fixture
def add_one_point_tour(controller):
    """Commit 'T1': explicit leg, then a single waypoint"""
    def build():
        assert controller.start_new_tour(
            "T1", "Informatics at UoE", "The Informatics Forum and Appleton Tower\n") is Status.OK
        controller.set_location(300, -500)
        assert controller.add_leg("Start at NE corner of George Square\n") is Status.OK
        assert controller.add_waypoint("Informatics Forum") is Status.OK
        assert controller.end_new_tour() is Status.OK
    return build


@pytest.fixture
def add_two_point_tour(controller):
    """Commit 'T2': Edinburgh Castle (implicit leg), Royal Mile, Holyrood"""
    def build():
        assert controller.start_new_tour(
            "T2", "Old Town", "From Edinburgh Castle to Holyrood\n") is Status.OK
        controller.set_location(-500, 0)
        assert controller.add_waypoint("Edinburgh Castle\n") is Status.OK
        assert controller.add_leg("Royal Mile\n") is Status.OK
        assert controller.end_new_tour() is Status.ERROR
        controller.set_location(1000, 300)
        assert controller.add_waypoint("Holyrood Palace\n") is Status.OK
        assert controller.end_new_tour() is Status.OK
    return build
