"""Unit and property-based tests for clickable segment composition."""
from hypothesis import given
from hypothesis import strategies as st

from chatfmt.markup import (
    ClickAction,
    ClickActionKind,
    ClickRegion,
    StyledFragment,
    TextStyle,
    find_click_region,
    insert_command_in_message,
    to_plain_text,
    translate_to_fragments,
)


class TestFindClickRegion:
    """Tests for find_click_region."""

    def test_finds_first_pair(self):
        region = find_click_region("Click @run@ to continue")

        assert region == ClickRegion(start=6, end=11, text="run")

    def test_single_delimiter(self):
        assert find_click_region("mail me @ home") is None

    def test_no_delimiter(self):
        assert find_click_region("nothing here") is None

    def test_empty_region(self):
        assert find_click_region("a@@b") == ClickRegion(start=1, end=3, text="")

    def test_multi_character_delimiter(self):
        region = find_click_region("go [[here]] now", "[[")

        assert region is None
        region = find_click_region("go ||here|| now", "||")
        assert region == ClickRegion(start=3, end=11, text="here")

    def test_empty_delimiter(self):
        assert find_click_region("@a@", "") is None


class TestInsertCommandInMessage:
    """Tests for insert_command_in_message."""

    def test_prefix_clickable_suffix(self):
        """Test the three-fragment layout around a click region."""
        fragments = insert_command_in_message("Click @run@ to continue", "/help")

        assert fragments == [
            StyledFragment(text="Click "),
            StyledFragment(text="run", click_action=ClickAction(value="/help")),
            StyledFragment(text=" to continue"),
        ]
        assert to_plain_text(fragments) == "Click run to continue"

    def test_runs_caller_command_not_region_text(self):
        """Test that the bound command comes from the caller."""
        fragments = insert_command_in_message("Press @here@", "/spawn")

        clickable = fragments[-1]
        assert clickable.text == "here"
        assert clickable.click_action.action == ClickActionKind.RUN_COMMAND
        assert clickable.click_action.value == "/spawn"

    def test_region_only(self):
        """Test that a message that is only a region has no prefix or suffix."""
        fragments = insert_command_in_message("@go@", "/go")

        assert fragments == [StyledFragment(text="go", click_action=ClickAction(value="/go"))]

    def test_only_first_region_is_clickable(self):
        """Test that later delimiter pairs stay literal."""
        fragments = insert_command_in_message("@a@ and @b@", "/a")

        assert fragments[0].text == "a"
        assert fragments[0].is_clickable
        assert fragments[1:] == [StyledFragment(text=" and @b@")]

    def test_without_region_matches_plain_translation(self):
        message = "&aNo &lbuttons here"

        assert insert_command_in_message(message, "/x") == translate_to_fragments(message)

    def test_unclosed_delimiter(self):
        fragments = insert_command_in_message("Email me@example.com", "/x")

        assert fragments == [StyledFragment(text="Email me@example.com")]

    def test_colors_around_region(self):
        """Test that prefix, region and suffix are translated separately."""
        fragments = insert_command_in_message("&7Click &a@&lhere@&7 now", "/go")

        assert fragments == [
            StyledFragment(text="Click ", style=TextStyle(color="gray")),
            StyledFragment(
                text="here",
                style=TextStyle(bold=True),
                click_action=ClickAction(value="/go"),
            ),
            StyledFragment(text=" now", style=TextStyle(color="gray")),
        ]

    def test_styled_region_is_one_fragment(self):
        """Test that codes inside the region give one clickable fragment."""
        fragments = insert_command_in_message("@&aYes&r, &cplease@", "/yes")

        assert len(fragments) == 1
        assert fragments[0].text == "Yes, please"
        assert fragments[0].style == TextStyle(color="green")

    def test_region_keeps_only_first_run_style(self):
        """Test that a later format code inside the region has no effect."""
        fragments = insert_command_in_message("@&aOn&lward@", "/go")

        assert fragments == [
            StyledFragment(
                text="Onward",
                style=TextStyle(color="green"),
                click_action=ClickAction(value="/go"),
            )
        ]

    def test_empty_region(self):
        fragments = insert_command_in_message("Hi @@there", "/x")

        assert fragments == [
            StyledFragment(text="Hi "),
            StyledFragment(text="", click_action=ClickAction(value="/x")),
            StyledFragment(text="there"),
        ]

    def test_placeholder_text_is_not_special(self):
        """Test that "####" in the message is kept as ordinary text."""
        fragments = insert_command_in_message("#### @vote@ ####", "/vote")

        assert [f.text for f in fragments] == ["#### ", "vote", " ####"]
        assert fragments[1].is_clickable

    def test_custom_markers(self):
        fragments = insert_command_in_message(
            "$aAccept? |yes|", "/accept", color_char="$", delimiter="|"
        )

        assert fragments[0] == StyledFragment(text="Accept? ", style=TextStyle(color="green"))
        assert fragments[1].text == "yes"
        assert fragments[1].click_action.value == "/accept"

    def test_empty_message(self):
        assert insert_command_in_message("", "/x") == []

    @given(st.text().filter(lambda s: s.count("@") < 2), st.text())
    def test_no_pair_means_no_click_action(self, message: str, command: str):
        """Property test: without a delimiter pair nothing is clickable."""
        fragments = insert_command_in_message(message, command)

        assert not any(f.is_clickable for f in fragments)
        assert fragments == translate_to_fragments(message)

    @given(
        st.text(alphabet=st.characters(exclude_characters="@"), max_size=20),
        st.text(alphabet=st.characters(exclude_characters="@&§"), max_size=20),
        st.text(max_size=20),
        st.text(max_size=10),
    )
    def test_clickable_position_matches_region(self, prefix: str, bound: str, suffix: str, command: str):
        """Property test: exactly one clickable fragment, placed where the region was."""
        message = f"{prefix}@{bound}@{suffix}"
        fragments = insert_command_in_message(message, command)

        clickable = [i for i, f in enumerate(fragments) if f.is_clickable]
        assert len(clickable) == 1
        index = clickable[0]
        assert fragments[:index] == translate_to_fragments(prefix)
        assert fragments[index].text == bound
        assert fragments[index].click_action.value == command
        assert fragments[index + 1:] == translate_to_fragments(suffix)
