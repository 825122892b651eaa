import pytest

from just_getopt.parser import Args, Opt, OptFlag, OptSpecs, OptValue, parse


@pytest.fixture
def help_file_specs() -> OptSpecs:
    return (
        OptSpecs()
        .add_option("help", "h", OptValue.NONE)
        .add_option("help", "help", OptValue.NONE)
        .add_option("file", "f", OptValue.REQUIRED)
        .add_option("file", "file", OptValue.REQUIRED)
    )


def test_short_and_long_aliases(help_file_specs):
    """Test short and long names sharing an identifier."""
    args = parse(
        help_file_specs.build(), ["-h", "--help", "-f123", "-f", "456", "foo", "bar"]
    )
    assert args.options == (
        Opt("help", "h", False, None),
        Opt("help", "help", False, None),
        Opt("file", "f", True, "123"),
        Opt("file", "f", True, "456"),
    )
    assert args.other == ("foo", "bar")
    assert args.unknown == ()
    assert not args.arg_limit_exceeded


def test_parse_accepts_builder_and_iterables(help_file_specs):
    """Test parsing with a builder and with any iterable."""
    expected = parse(help_file_specs.build(), ["-h", "--file=x", "y"])
    assert parse(help_file_specs, ["-h", "--file=x", "y"]) == expected
    assert parse(help_file_specs, ("-h", "--file=x", "y")) == expected
    assert parse(help_file_specs, iter(["-h", "--file=x", "y"])) == expected
    assert help_file_specs.getopt(arg for arg in ["-h", "--file=x", "y"]) == expected


def test_parse_converts_elements_to_text(help_file_specs):
    """Test that arguments are converted to text."""
    args = parse(help_file_specs, ["-f", 123, 4.5])
    assert args.options_value_first("file") == "123"
    assert args.other == ("4.5",)


def test_parse_rejects_a_single_string(help_file_specs):
    """Test that a single string is not parsed character by character."""
    with pytest.raises(TypeError):
        parse(help_file_specs, "-h")


def test_first_other_argument_stops_option_parsing():
    """Test that the first other argument stops option parsing."""
    specs = OptSpecs().add_option("h", "h")
    args = specs.getopt(["-h", "foo", "-h"])
    assert args.options == (Opt("h", "h"),)
    assert args.other == ("foo", "-h")


def test_options_everywhere():
    """Test mixing options and other arguments."""
    specs = OptSpecs().add_option("h", "h").set_flag(OptFlag.OPTIONS_EVERYWHERE)
    args = specs.getopt(["-h", "foo", "-h"])
    assert args.options == (Opt("h", "h"), Opt("h", "h"))
    assert args.other == ("foo",)


def test_options_everywhere_with_values(help_file_specs):
    """Test mixing options with values and other arguments."""
    help_file_specs.set_flag(OptFlag.OPTIONS_EVERYWHERE)
    args = help_file_specs.getopt(
        ["-h", "foo", "--help", "--file=123", "bar", "--file", "456"]
    )
    assert args.options_first("help").name == "h"
    assert args.options_last("help").name == "help"
    assert args.options_value_all("file") == ["123", "456"]
    assert args.other == ("foo", "bar")


def test_short_option_clusters_with_unknowns():
    """Test short option clusters with unknown characters."""
    specs = OptSpecs().add_option("debug", "d", OptValue.OPTIONAL)
    args = specs.getopt(["-abcd", "-adbc"])
    assert args.unknown == ("a", "b", "c")
    assert args.options == (
        Opt("debug", "d", False, None),
        Opt("debug", "d", False, "bc"),
    )


def test_cluster_mixes_unknown_and_known_flags():
    """Test unknown and known flags in one cluster."""
    specs = OptSpecs().add_option("bee", "b")
    args = specs.getopt(["-abc"])
    assert args.unknown == ("a", "c")
    assert args.options == (Opt("bee", "b"),)


def test_cluster_with_required_value_takes_rest_or_next():
    """Test that a required value takes the rest of the cluster or the next argument."""
    specs = (
        OptSpecs()
        .add_option("all", "a")
        .add_option("file", "f", OptValue.REQUIRED)
        .add_option("bee", "b")
    )
    args = specs.getopt(["-afb", "-af", "-b", "x"])
    assert args.options == (
        Opt("all", "a"),
        Opt("file", "f", True, "b"),
        Opt("all", "a"),
        Opt("file", "f", True, "-b"),
    )
    assert args.other == ("x",)


def test_optional_values():
    """Test optional values of short and long options."""
    specs = (
        OptSpecs()
        .add_option("debug", "d", OptValue.OPTIONAL)
        .add_option("verbose", "verbose", OptValue.OPTIONAL)
    )
    args = specs.getopt(["-d1", "-d", "--verbose", "--verbose=123", "--verbose="])
    assert args.options == (
        Opt("debug", "d", False, "1"),
        Opt("debug", "d", False, None),
        Opt("verbose", "verbose", False, None),
        Opt("verbose", "verbose", False, "123"),
        Opt("verbose", "verbose", False, ""),
    )


def test_optional_value_is_never_taken_from_next_argument():
    """Test that optional values are never taken from the next argument."""
    specs = OptSpecs().add_option("debug", "debug", OptValue.OPTIONAL)
    args = specs.getopt(["--debug", "foo"])
    assert args.options == (Opt("debug", "debug", False, None),)
    assert args.other == ("foo",)


def test_all_aliases_share_identifier():
    """Test that every alias reports the same identifier."""
    specs = (
        OptSpecs()
        .add_option("aaa", "bbb")
        .add_option("aaa", "c")
        .add_option("aaa", "d")
        .add_option("aaa", "eee")
    )
    args = specs.getopt(["--bbb", "-cd", "--eee"])
    assert [opt.name for opt in args.options_all("aaa")] == ["bbb", "c", "d", "eee"]


def test_prefix_match_long_options():
    """Test matching long options by unique prefix."""
    specs = (
        OptSpecs()
        .set_flag(OptFlag.PREFIX_MATCH_LONG_OPTIONS)
        .add_option("version", "version")
        .add_option("verbose", "verbose")
    )
    args = specs.getopt(["--ver", "--verb", "--versi", "--verbose"])
    assert args.unknown == ("ver",)
    assert args.options == (
        Opt("verbose", "verb"),
        Opt("version", "versi"),
        Opt("verbose", "verbose"),
    )


def test_exact_long_names_without_prefix_matching():
    """Test that long names must match exactly by default."""
    specs = OptSpecs().add_option("version", "version").add_option("verbose", "verbose")
    args = specs.getopt(["--version", "--ver", "--verb", "--versi", "--verbose"])
    assert args.unknown == ("ver", "verb", "versi")
    assert [opt.name for opt in args.options] == ["version", "verbose"]


def test_prefix_matching_an_exact_name_can_be_ambiguous():
    """Test that an exact name prefixing another name is ambiguous."""
    specs = (
        OptSpecs()
        .set_flag(OptFlag.PREFIX_MATCH_LONG_OPTIONS)
        .add_option("verb", "verb")
        .add_option("verbose", "verbose")
    )
    args = specs.getopt(["--verb", "--verbo"])
    assert args.unknown == ("verb",)
    assert args.options == (Opt("verbose", "verbo"),)


def test_terminator_stops_option_parsing():
    """Test that `--` stops option parsing."""
    specs = (
        OptSpecs()
        .set_flag(OptFlag.OPTIONS_EVERYWHERE)
        .add_option("help", "h")
        .add_option("file", "file", OptValue.REQUIRED)
    )
    args = specs.getopt(["-h", "foo", "--file=123", "--", "bar", "--file", "456"])
    assert args.options_first("help").name == "h"
    assert args.options_value_all("file") == ["123"]
    assert args.other == ("foo", "bar", "--file", "456")


def test_required_value_consumes_terminator():
    """Test that a required value may be `--`."""
    specs = OptSpecs().add_option("file", "file", OptValue.REQUIRED)
    args = specs.getopt(["--file", "--", "--", "--"])
    assert args.options == (Opt("file", "file", True, "--"),)
    assert args.other == ("--",)
    assert args.required_value_missing() == []


def test_only_the_first_terminator_is_consumed():
    """Test that only the first `--` is consumed."""
    args = OptSpecs().getopt(["--", "--", "-a"])
    assert args.other == ("--", "-a")
    assert args.unknown == ()


def test_required_values_empty_and_missing():
    """Test empty and missing required values."""
    specs = OptSpecs().add_option("file", "file", OptValue.REQUIRED)
    args = specs.getopt(["--file=", "--file"])
    assert args.options == (
        Opt("file", "file", True, ""),
        Opt("file", "file", True, None),
    )
    assert args.required_value_missing() == [Opt("file", "file", True, None)]


def test_short_required_values():
    """Test required values of short options."""
    specs = (
        OptSpecs()
        .add_option("file", "f", OptValue.REQUIRED)
        .add_option("debug", "d", OptValue.REQUIRED)
    )
    args = specs.getopt(["-f123", "-d", "", "-f", "456", "-f"])
    assert args.options_value_all("file") == ["123", "456"]
    assert args.options_value_all("debug") == [""]
    assert args.options_last("file").value is None
    missing = args.required_value_missing()
    assert len(missing) == 1
    assert missing[0].name == "f"


def test_long_required_values():
    """Test required values of long options."""
    specs = (
        OptSpecs()
        .add_option("file", "file", OptValue.REQUIRED)
        .add_option("debug", "debug", OptValue.REQUIRED)
    )
    args = specs.getopt(["--file=123", "--debug", "", "--file", "456", "--file"])
    assert args.options_value_all("file") == ["123", "456"]
    assert args.options_value_all("debug") == [""]
    assert [opt.name for opt in args.required_value_missing()] == ["file"]


def test_no_value_long_option_with_equal_sign_is_unknown():
    """Test that `--name=` on a flag is unknown as `name=`."""
    specs = OptSpecs().add_option("bar", "bar", OptValue.NONE)
    args = specs.getopt(["-aaa", "--foo", "--foo", "--bar=", "--bar=", "--bar=x", "--bar"])
    assert args.unknown == ("a", "foo", "bar=")
    assert args.options == (Opt("bar", "bar"),)


def test_everything_unknown_without_declarations():
    """Test that every option is unknown without declarations."""
    args = OptSpecs().getopt(
        ["-abcd", "-e", "--debug", "--", "--debug=", "foo", "--debug=456"]
    )
    assert args.options == ()
    assert args.other == ("--debug=", "foo", "--debug=456")
    assert args.unknown == ("a", "b", "c", "d", "e", "debug")


def test_invalid_long_names_are_unknown():
    """Test that invalid long names are unknown."""
    specs = OptSpecs().add_option("a", "a")
    args = specs.getopt(["--a", "--=x", "--a=b", "--x y"])
    assert args.unknown == ("a", "", "x y")
    assert args.options == ()


def test_invalid_short_characters_are_unknown():
    """Test that invalid short option characters are unknown."""
    specs = OptSpecs().add_option("a", "a").add_option("b", "b")
    args = specs.getopt(["-a-b", "-a b"])
    assert args.unknown == ("-", " ")
    assert [opt.name for opt in args.options] == ["a", "b", "a", "b"]


@pytest.mark.parametrize("token", ["-", "---", "---x", "", "foo", " -a"])
def test_option_like_tokens_that_are_other_arguments(token):
    """Test tokens that look like options but are other arguments."""
    args = OptSpecs().set_flag(OptFlag.OPTIONS_EVERYWHERE).getopt([token, "-x"])
    assert args.other == (token,)
    assert args.unknown == ("x",)


def test_empty_input():
    """Test parsing an empty command line."""
    assert OptSpecs().getopt([]) == Args()


def test_every_token_is_accounted_for():
    """Test that every token ends up in the result or as a value."""
    specs = (
        OptSpecs()
        .set_flag(OptFlag.OPTIONS_EVERYWHERE)
        .add_options("file", ["f", "file"], OptValue.REQUIRED)
        .add_options("help", ["h", "help"])
    )
    tokens = ["-h", "a", "--file", "b", "-fc", "--nope", "d", "--", "-h"]
    args = specs.getopt(tokens)
    assert args.options == (
        Opt("help", "h"),
        Opt("file", "file", True, "b"),
        Opt("file", "f", True, "c"),
    )
    assert args.other == ("a", "d", "-h")
    assert args.unknown == ("nope",)


def test_unknown_deduplicated_options_not():
    """Test that unknown options are deduplicated and options are not."""
    specs = OptSpecs().add_option("v", "v").set_flag(OptFlag.OPTIONS_EVERYWHERE)
    args = specs.getopt(["-vxv", "-x", "--xx", "--xx", "-v", "o", "o"])
    assert args.unknown == ("x", "xx")
    assert len(args.options) == 3
    assert args.other == ("o", "o")
