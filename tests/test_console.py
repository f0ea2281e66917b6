import pytest

from sansfight.console import (
    BLIT_2BPP,
    BLIT_FLIP_X,
    BLIT_FLIP_Y,
    BLIT_ROTATE,
    SCREEN_SIZE,
    SYSTEM_PRESERVE_FRAMEBUFFER,
    Console,
    TextCall,
    ToneCall,
    ToneFlag,
)


def lit(console):
    return {
        (x, y)
        for y in range(SCREEN_SIZE)
        for x in range(SCREEN_SIZE)
        if console.pixel(x, y)
    }


def test_fresh_console_is_blank():
    assert lit(Console()) == set()


@pytest.mark.parametrize("x,y", [(SCREEN_SIZE, 0), (0, SCREEN_SIZE), (-1, 0), (0, -1)])
def test_pixel_off_screen_raises(x, y):
    with pytest.raises(IndexError):
        Console().pixel(x, y)


def test_rect_fill_and_outline():
    console = Console()
    console.draw_colors = 0x42
    console.rect(10, 10, 5, 5)
    box = {(x, y) for x in range(10, 15) for y in range(10, 15)}
    assert lit(console) == box
    assert console.pixel(12, 12) == 1
    edges = {(x, y) for x, y in box if x in (10, 14) or y in (10, 14)}
    assert {console.pixel(x, y) for x, y in edges} == {3}


def test_rect_without_outline_is_all_fill():
    console = Console()
    console.draw_colors = 0x02
    console.rect(0, 0, 4, 3)
    assert {console.pixel(x, y) for x in range(4) for y in range(3)} == {1}


def test_rect_is_clipped_at_screen_edge():
    console = Console()
    console.draw_colors = 0x02
    console.rect(-5, -5, 10, 10)
    assert lit(console) == {(x, y) for x in range(5) for y in range(5)}


def test_hline_and_vline_lengths():
    console = Console()
    console.draw_colors = 0x02
    console.hline(3, 4, 6)
    assert lit(console) == {(x, 4) for x in range(3, 9)}
    console.begin_frame()
    console.vline(3, 4, 6)
    assert lit(console) == {(3, y) for y in range(4, 10)}


def test_diagonal_line():
    console = Console()
    console.draw_colors = 0x02
    console.line(0, 0, 9, 9)
    assert lit(console) == {(i, i) for i in range(10)}


def test_line_covers_endpoints_once_per_major_step():
    console = Console()
    console.draw_colors = 0x02
    console.line(20, 7, 3, 2)
    pixels = lit(console)
    assert (3, 2) in pixels and (20, 7) in pixels
    assert len(pixels) == max(20 - 3, 7 - 2) + 1
    assert len({x for x, _ in pixels}) == len(pixels)


def test_transparent_line_draws_nothing():
    console = Console()
    console.draw_colors = 0x20
    console.line(0, 0, 30, 5)
    assert lit(console) == set()


def test_blit_1bpp_uses_second_colour_for_set_bits():
    console = Console()
    console.draw_colors = 0x20
    console.blit(bytes([0b10000001]), 0, 0, 8, 1, 0)
    assert lit(console) == {(0, 0), (7, 0)}
    assert console.pixel(0, 0) == 1


def test_blit_2bpp_maps_every_index():
    console = Console()
    console.draw_colors = 0x4321
    console.blit(bytes([0b00011011]), 0, 0, 4, 1, BLIT_2BPP)
    assert [console.pixel(x, 0) for x in range(4)] == [0, 1, 2, 3]


def test_blit_flip_x_mirrors_row():
    console = Console()
    console.draw_colors = 0x20
    console.blit(bytes([0b11000000]), 0, 0, 8, 1, BLIT_FLIP_X)
    assert lit(console) == {(6, 0), (7, 0)}


def test_blit_flip_y_mirrors_column():
    console = Console()
    console.draw_colors = 0x20
    console.blit(bytes([0xFF, 0x00]), 0, 0, 8, 2, BLIT_FLIP_Y)
    assert lit(console) == {(x, 1) for x in range(8)}


def test_blit_rotate_turns_row_into_column():
    console = Console()
    console.draw_colors = 0x20
    console.blit(bytes([0b10000000]), 0, 0, 8, 1, BLIT_ROTATE)
    assert lit(console) == {(0, 7)}


def test_blit_matches_blit_sub_of_whole_sprite():
    sprite = bytes([0x9C, 0x84, 0x00, 0x02])
    whole, part = Console(), Console()
    whole.blit(sprite, 5, 6, 8, 4, 0)
    part.blit_sub(sprite, 5, 6, 8, 4, 0, 0, 8, 0)
    assert whole.framebuffer == part.framebuffer


def test_blit_sub_reads_region_of_atlas():
    console = Console()
    console.draw_colors = 0x20
    console.blit_sub(bytes([0x00, 0xFF]), 0, 0, 8, 1, 8, 0, 16, 0)
    assert lit(console) == {(x, 0) for x in range(8)}


def test_blit_clips_off_screen_parts():
    console = Console()
    console.draw_colors = 0x20
    console.blit(bytes([0xFF]), SCREEN_SIZE - 3, 0, 8, 1, 0)
    assert lit(console) == {(x, 0) for x in range(SCREEN_SIZE - 3, SCREEN_SIZE)}


def test_oval_fill_outline_and_symmetry():
    console = Console()
    console.draw_colors = 0x42
    console.oval(10, 10, 5, 5)
    pixels = lit(console)
    assert console.pixel(12, 12) == 1
    assert console.pixel(12, 10) == 3
    assert (10, 10) not in pixels
    assert pixels <= {(x, y) for x in range(10, 15) for y in range(10, 15)}
    assert pixels == {(24 - x, y) for x, y in pixels}
    assert pixels == {(y, x) for x, y in pixels}


def test_empty_oval_draws_nothing():
    console = Console()
    console.draw_colors = 0x42
    console.oval(10, 10, 0, 5)
    assert lit(console) == set()


def test_text_records_call_and_fills_background():
    console = Console()
    console.draw_colors = 0x21
    console.text("AB", 0, 0)
    assert console.texts == [TextCall("AB", 0, 0, 0, 1)]
    assert lit(console) == {(x, y) for x in range(16) for y in range(8)}


def test_text_newline_moves_down_a_line():
    call = TextCall("A\nB", 4, 0, 0, None)
    assert list(call.glyphs()) == [("A", 4, 0), ("B", 4, 8)]


def test_tone_is_queued():
    console = Console()
    console.tone(440, 10, 50, ToneFlag.PULSE2 | ToneFlag.PAN_LEFT)
    assert console.tones == [ToneCall(440, 10, 50, ToneFlag.PULSE2 | ToneFlag.PAN_LEFT)]


def test_begin_frame_clears_screen_and_tones():
    console = Console()
    console.draw_colors = 0x02
    console.rect(0, 0, 3, 3)
    console.tone(100, 1, 1, 0)
    console.begin_frame()
    assert lit(console) == set()
    assert console.tones == []


def test_begin_frame_preserves_framebuffer_when_asked():
    console = Console()
    console.system_flags = SYSTEM_PRESERVE_FRAMEBUFFER
    console.draw_colors = 0x02
    console.rect(0, 0, 2, 2)
    console.begin_frame()
    assert lit(console) == {(0, 0), (1, 0), (0, 1), (1, 1)}


def test_trace_records_messages():
    console = Console()
    console.trace("hello")
    console.trace("world")
    assert console.traces == ["hello", "world"]