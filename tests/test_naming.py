"""Tests for the naming module."""

from resolvergen.naming import (
    accessor_name,
    args_name,
    camel_to_snake,
    python_name,
    resolver_name,
    upper_first,
)


class TestPythonName:
    """Test GraphQL field name -> Python attribute conversion."""

    def test_lower_case(self):
        assert python_name("name") == "name"

    def test_camel_case(self):
        assert python_name("createdAt") == "created_at"

    def test_trailing_acronym(self):
        assert python_name("userID") == "user_id"

    def test_upper_case_id(self):
        assert python_name("ID") == "id"

    def test_leading_acronym(self):
        assert python_name("URLPath") == "url_path"

    def test_keyword(self):
        """Python keywords get a trailing underscore."""
        assert python_name("from") == "from_"
        assert python_name("class") == "class_"

    def test_holder_attribute_reserved(self):
        """The resolver wrapper keeps its data holder in `r`."""
        assert python_name("r") == "r_"
        assert python_name("R") == "r_"
        assert python_name("rank") == "rank"

    def test_soft_keyword_kept(self):
        """Names that are only soft keywords stay unchanged on every Python."""
        assert python_name("type") == "type"
        assert python_name("match") == "match"

    def test_valid_python_identifier(self):
        for name in ("folderId", "createFile", "__typename", "x1Y2", "import"):
            assert python_name(name).isidentifier()


class TestSynthesizedNames:
    """Test names of generated declarations."""

    def test_resolver_name(self):
        assert resolver_name("Folder") == "FolderResolver"

    def test_args_name(self):
        assert args_name("createFile") == "CreateFileArgs"

    def test_args_name_depends_on_field_only(self):
        assert args_name("friends") == args_name("friends") == "FriendsArgs"

    def test_accessor_name(self):
        assert accessor_name("Folder") == "to_folder"
        assert accessor_name("FileVersion") == "to_file_version"

    def test_upper_first(self):
        assert upper_first("person") == "Person"
        assert upper_first("_private") == "_Private"
        assert upper_first("") == ""

    def test_camel_to_snake(self):
        assert camel_to_snake("PascalCase") == "pascal_case"
