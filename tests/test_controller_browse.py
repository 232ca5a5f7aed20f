from tourguide import Annotation, BrowseDetails, BrowseOverview, Mode, Status

OVERVIEW = BrowseOverview((("T1", "Informatics at UoE"), ("T2", "Old Town")))


def test_browsing_two_tours(controller, add_one_point_tour, add_two_point_tour):
    add_one_point_tour()
    add_two_point_tour()
    assert controller.get_output() == [OVERVIEW]

    assert controller.show_tour_details("T3") is Status.ERROR
    assert controller.get_output() == [OVERVIEW]
    assert controller.mode is Mode.BROWSE_OVERVIEW

    assert controller.show_tour_details("T1") is Status.OK
    assert controller.mode is Mode.BROWSE_DETAILS
    assert controller.get_output() == [BrowseDetails(
        "T1", "Informatics at UoE", Annotation("The Informatics Forum and Appleton Tower\n"))]


def test_details_to_details(controller, add_one_point_tour, add_two_point_tour):
    add_one_point_tour()
    add_two_point_tour()
    controller.show_tour_details("T1")
    assert controller.show_tour_details("T2") is Status.OK
    assert controller.get_output()[0].tour_id == "T2"

    # unknown id keeps the details on show
    assert controller.show_tour_details("nope") is Status.ERROR
    assert controller.mode is Mode.BROWSE_DETAILS
    assert controller.get_output()[0].tour_id == "T2"


def test_browse_sorted_by_id(controller, add_one_point_tour, add_two_point_tour):
    assert controller.start_new_tour("T3", "Meh third", "Blahtown\n") is Status.OK
    controller.set_location(300, -500)
    assert controller.add_leg("Start at Terminal 3\n") is Status.OK
    assert controller.add_waypoint("Run away") is Status.OK
    assert controller.end_new_tour() is Status.OK

    add_one_point_tour()
    add_two_point_tour()

    assert controller.get_output() == [BrowseOverview((
        ("T1", "Informatics at UoE"),
        ("T2", "Old Town"),
        ("T3", "Meh third"),
    ))]


def test_cannot_browse_while_creating(controller, add_one_point_tour):
    add_one_point_tour()
    controller.start_new_tour("T2", "Old Town")
    before = controller.get_output()
    assert controller.show_tour_details("T1") is Status.ERROR
    assert controller.follow_tour("T1") is Status.ERROR
    assert controller.mode is Mode.CREATING
    assert controller.get_output() == before


def test_in_progress_tour_is_not_listed(controller, add_one_point_tour):
    add_one_point_tour()
    controller.start_new_tour("T2", "Old Town")
    assert controller.tour_ids() == ["T1"]
    assert controller.get_tour("T2") is None


def test_overview_to_dict(controller, add_one_point_tour, add_two_point_tour):
    add_one_point_tour()
    add_two_point_tour()
    assert controller.get_output()[0].to_dict() == {
        "kind": "BrowseOverview",
        "tours": [
            {"id": "T1", "title": "Informatics at UoE"},
            {"id": "T2", "title": "Old Town"},
        ],
    }
