"""
Unit tests for scene file loading.
"""

import json

import msgpack
import pytest

from graphwalk.scene import SceneError, load_scene, parse_scene

SCENE = {
    "start": "a",
    "goal": "Dee",
    "vertices": [
        {"id": "a", "name": "A", "position": [0, 0, 0], "priority": 2, "neighbors": ["b", 2]},
        {"id": "b", "position": [1, 2], "neighbors": None},
        {"name": "C", "neighbors": ["Dee"]},
        {"name": "Dee", "position": [3, 4, 5]},
    ],
}


class TestParseScene:
    """Test document -> Graph conversion."""

    def test_references_resolved(self):
        graph = parse_scene(SCENE)
        assert len(graph) == 4
        assert graph[0].neighbors == [1, 2]
        assert graph[2].neighbors == [3]
        assert graph.start == 0
        assert graph.goal == 3

    def test_fields(self):
        graph = parse_scene(SCENE)
        assert graph[0].priority == 2
        assert graph[1].priority is None
        assert graph[1].position == (1.0, 2.0, 0.0)
        assert graph[3].position == (3.0, 4.0, 5.0)
        assert graph[2].position == (0.0, 0.0, 0.0)

    def test_null_neighbors_mean_none(self):
        graph = parse_scene(SCENE)
        assert graph[1].neighbors == []

    def test_unnamed_vertices_left_for_initialize(self):
        graph = parse_scene(SCENE)
        assert graph[1].name is None
        graph.initialize()
        assert graph[1].name == "Vertex 2"

    def test_id_takes_precedence_over_name(self):
        graph = parse_scene({
            "vertices": [
                {"id": "x", "name": "y"},
                {"id": "y", "name": "z"},
                {"neighbors": ["y"]},
            ],
        })
        assert graph[2].neighbors == [1]

    def test_empty_document(self):
        graph = parse_scene({})
        assert len(graph) == 0
        assert graph.start is None

    def test_unknown_reference(self):
        with pytest.raises(SceneError, match="Unknown"):
            parse_scene({"vertices": [{"neighbors": ["nope"]}]})

    def test_index_out_of_range(self):
        with pytest.raises(SceneError, match="out of range"):
            parse_scene({"vertices": [{"neighbors": [5]}]})

    def test_bad_position(self):
        with pytest.raises(SceneError, match="position"):
            parse_scene({"vertices": [{"position": [1]}]})

    def test_bad_priority(self):
        with pytest.raises(SceneError, match="priority"):
            parse_scene({"vertices": [{"priority": "high"}]})

    def test_not_a_mapping(self):
        with pytest.raises(SceneError):
            parse_scene([])  # type: ignore[arg-type]

    def test_scene_error_is_value_error(self):
        assert issubclass(SceneError, ValueError)


class TestLoadScene:
    """Test loading from disk."""

    def test_json(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text(json.dumps(SCENE), encoding="utf-8")
        graph = load_scene(path)
        assert graph.goal == 3

    def test_msgpack(self, tmp_path):
        path = tmp_path / "scene.msgpack"
        path.write_bytes(msgpack.packb(SCENE))
        graph = load_scene(path)
        assert graph[0].neighbors == [1, 2]
        assert graph.start == 0

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "scene.yaml"
        path.write_text("vertices: []", encoding="utf-8")
        with pytest.raises(SceneError, match="Unsupported"):
            load_scene(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scene(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SceneError, match="decode"):
            load_scene(path)

    def test_bundled_scenes_load(self, scenes_dir):
        """Every shipped scene loads and passes validation."""
        paths = sorted(scenes_dir.glob("*.json"))
        assert paths
        for path in paths:
            graph = load_scene(path)
            graph.initialize()
            assert all(graph.validate().values()), path.name
