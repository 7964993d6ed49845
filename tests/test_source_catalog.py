from disparity_view.source_catalog import (
    DEFAULT_TRANSPORT,
    DISPARITY_TYPES,
    SelectableSource,
    SourceDescriptor,
    display_label,
    filter_sources,
    parse_label,
    topic_labels,
)

DISPARITY = "stereo_msgs/DisparityImage"


class TestFilterSources:

    def test_raw_topic_yields_default_transport(self):
        sources = filter_sources([SourceDescriptor("/stereo/disparity", DISPARITY)], {DISPARITY})

        assert SelectableSource("/stereo/disparity", "default") in sources

    def test_transport_suffix_yields_extra_entry(self):
        sources = filter_sources(
            [SourceDescriptor("/stereo/disparity/compressed", DISPARITY)], {DISPARITY}
        )

        assert sources == {
            SelectableSource("/stereo/disparity/compressed", DEFAULT_TRANSPORT),
            SelectableSource("/stereo/disparity", "compressed"),
        }

    def test_other_types_are_dropped(self):
        descriptors = [
            SourceDescriptor("/zed/left/image_rect", "sensor_msgs/msg/Image"),
            SourceDescriptor("/zed/odom", "nav_msgs/msg/Odometry"),
        ]

        assert filter_sources(descriptors, {DISPARITY}) == set()

    def test_empty_input(self):
        assert filter_sources([], {DISPARITY}) == set()
        assert filter_sources([SourceDescriptor("/stereo/disparity", DISPARITY)], set()) == set()

    def test_non_transport_suffix_is_not_split(self):
        sources = filter_sources([SourceDescriptor("/stereo/disparity", DISPARITY)], {DISPARITY})

        assert sources == {SelectableSource("/stereo/disparity", DEFAULT_TRANSPORT)}

    def test_duplicates_collapse(self):
        descriptor = SourceDescriptor("/stereo/disparity", DISPARITY)

        assert len(filter_sources([descriptor, descriptor], {DISPARITY})) == 1

    def test_default_types_accept_ros1_and_ros2_names(self):
        descriptors = [
            SourceDescriptor("/a/disparity", "stereo_msgs/DisparityImage"),
            SourceDescriptor("/b/disparity", "stereo_msgs/msg/DisparityImage"),
        ]

        assert {s.topic_path for s in filter_sources(descriptors)} == {"/a/disparity", "/b/disparity"}
        assert "stereo_msgs/msg/DisparityImage" in DISPARITY_TYPES

    def test_accepts_plain_tuples(self):
        sources = filter_sources([("/stereo/disparity", DISPARITY)], [DISPARITY])

        assert sources == {SelectableSource("/stereo/disparity")}


class TestLabels:

    def test_label_round_trip(self):
        for source in (
            SelectableSource("/stereo/disparity", DEFAULT_TRANSPORT),
            SelectableSource("/stereo/disparity", "compressed"),
        ):
            assert parse_label(source.label) == source

    def test_label_format(self):
        assert SelectableSource("/stereo/disparity").label == "/stereo/disparity"
        assert SelectableSource("/stereo/disparity", "compressed").label == "/stereo/disparity compressed"

    def test_empty_label_means_no_selection(self):
        assert parse_label("") == SelectableSource("", DEFAULT_TRANSPORT)

    def test_topic_name_restores_full_topic(self):
        assert SelectableSource("/stereo/disparity", "compressed").topic_name == "/stereo/disparity/compressed"
        assert SelectableSource("/stereo/disparity").topic_name == "/stereo/disparity"

    def test_display_label(self):
        assert display_label("/stereo/disparity compressed") == "/stereo/disparity/compressed"
        assert display_label("/stereo/disparity") == "/stereo/disparity"

    def test_topic_labels_are_sorted_with_empty_first(self):
        sources = filter_sources(
            [
                SourceDescriptor("/stereo/disparity/compressed", DISPARITY),
                SourceDescriptor("/b/disparity", DISPARITY),
            ],
            {DISPARITY},
        )

        assert topic_labels(sources) == [
            "",
            "/b/disparity",
            "/stereo/disparity compressed",
            "/stereo/disparity/compressed",
        ]
