"""An editor for the sound controller's registers, driven by a joypad.

The controller has 23 byte-wide registers from 0xFF10 to 0xFF26: four
sound channels ("modes" 1 to 4) and a block of global controls (mode 0).
:class:`SoundRegisters` holds a shadow copy of them as packed bit fields
and reports every byte it sends to a port. :class:`SoundEditor` shows one
page of parameters per mode and changes them in response to button presses.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum, IntFlag

__all__ = [
    "PLAY",
    "FREQUENCY",
    "NB_MODES",
    "PORT_BASE",
    "REGISTER_COUNT",
    "DEFAULT_REGISTERS",
    "FREQUENCIES",
    "Note",
    "MUSIC",
    "Param",
    "PAGES",
    "Button",
    "SoundRegisters",
    "SoundEditor",
    "music_frequencies",
]

PLAY = 0x20
FREQUENCY = 0x21
NB_MODES = 5

PORT_BASE = 0xFF10
REGISTER_COUNT = 0x17

ARROW = ">"

# Register image set up at start: channel 1 and 2 square waves, channel 3
# enabled, channel 4 noise, full volume on both outputs, master switch on.
DEFAULT_REGISTERS = bytes(
    [
        0x00, 0x81, 0x43, 0x73, 0x06,
        0x00, 0x81, 0x84, 0xD7, 0x06,
        0x80, 0x00, 0x20, 0xD6, 0x06,
        0x00, 0x3A, 0xA1, 0x00, 0x40,
        0x77, 0xFF, 0x80,
    ]
)

_NR14, _NR24, _NR34, _NR44 = 0x04, 0x09, 0x0E, 0x13
_NR52 = 0x16
_UNUSED = (0x05, 0x0F)
_LIVE_OFFSETS = tuple(o for o in range(REGISTER_COUNT) if o not in _UNUSED)

_NOTE_NAMES = [
    f"{name}{octave}"
    for octave in range(6)
    for name in ("C", "Cd", "D", "Dd", "E", "F", "Fd", "G", "Gd", "A", "Ad", "B")
]
Note = IntEnum("Note", _NOTE_NAMES + ["SILENCE", "END"], start=0)
Note.__doc__ = "Note numbers: twelve semitones in each of six octaves, then silence and end."

FREQUENCIES = (
    44, 156, 262, 363, 457, 547, 631, 710, 786, 854, 923, 986,
    1046, 1102, 1155, 1205, 1253, 1297, 1339, 1379, 1417, 1452, 1486, 1517,
    1546, 1575, 1602, 1627, 1650, 1673, 1694, 1714, 1732, 1750, 1767, 1783,
    1798, 1812, 1825, 1837, 1849, 1860, 1871, 1881, 1890, 1899, 1907, 1915,
    1923, 1930, 1936, 1943, 1949, 1954, 1959, 1964, 1969, 1974, 1978, 1982,
    1985, 1988, 1992, 1995, 1998, 2001, 2004, 2006, 2009, 2011, 2013, 2015,
)


def _notes(text: str) -> list[Note]:
    return [Note[name] for name in text.split()]


MUSIC = tuple(
    _notes("C3 C3 G3 G3 A3 A3 G3 SILENCE")
    + _notes("F3 F3 E3 E3 D3 D3 C3 SILENCE")
    + _notes("G3 G3 F3 F3 E3 E3 D3 D3")
    + _notes("G3 G3 F3 F3 E3 E3 D3 D3")
    + _notes("C3 C3 G3 G3 A3 A3 G3 SILENCE")
    + _notes("F3 F3 E3 E3 D3 D3 C3 SILENCE")
    + [Note.END]
)


def music_frequencies() -> list[int | None]:
    """The tune as channel frequencies, with None for each silent beat."""
    result: list[int | None] = []
    for note in MUSIC:
        if note == Note.END:
            break
        result.append(None if note == Note.SILENCE else FREQUENCIES[note])
    return result


@dataclass(frozen=True)
class Param:
    """One editable parameter: its label and largest value."""

    name: str
    max: int


def _page(title: str, *entries: tuple[str, int]) -> tuple[str, tuple[Param, ...]]:
    return title, tuple(Param(name, top) for name, top in entries)


PAGES = (
    _page(
        "Main Controls",
        ("All On/Off", 1), ("Vin->SO1", 1), ("Vin->SO2", 1),
        ("SO1 Volume", 7), ("SO2 Volume", 7),
    ),
    _page(
        "Sound Mode #1",
        ("Swp Time", 7), ("Swp Mode", 1), ("Swp Shifts", 7), ("Pat Duty", 3),
        ("Sound Len", 63), ("Env Init", 15), ("Env Mode", 1), ("Env Nb Swp", 7),
        ("Frequency", 2047), ("Cons Sel", 1), ("Out to SO1", 1), ("Out to SO2", 1),
        ("On/Off", 1),
    ),
    _page(
        "Sound Mode #2",
        ("Pat Duty", 3), ("Sound Len", 63), ("Env Init", 15), ("Env Mode", 1),
        ("Env Nb Step", 7), ("Frequency", 2047), ("Cons Sel", 1),
        ("Out to SO1", 1), ("Out to SO2", 1), ("On/Off", 1),
    ),
    _page(
        "Sound Mode #3",
        ("Sound On/Off", 1), ("Sound Len", 255), ("Sel Out Level", 3),
        ("Frequency", 2047), ("Cons Sel", 1), ("Out to SO1", 1), ("Out to SO2", 1),
        ("On/Off", 1),
    ),
    _page(
        "Sound Mode #4",
        ("Sound Len", 63), ("Env Init", 15), ("Env Mode", 1), ("Env Nb Step", 7),
        ("Poly Cnt Freq", 15), ("Poly Cnt Step", 1), ("Poly Cnt Div", 7),
        ("Cons Sel", 1), ("Out to SO1", 1), ("Out to SO2", 1), ("On/Off", 1),
    ),
)


class Button(IntFlag):
    """Joypad buttons as reported by the pad register."""

    RIGHT = 0x01
    LEFT = 0x02
    UP = 0x04
    DOWN = 0x08
    A = 0x10
    B = 0x20
    SELECT = 0x40
    START = 0x80


# Bit fields: name -> (register offset, lowest bit, width).
_FIELDS: dict[str, tuple[int, int, int]] = {
    "sweep_time": (0x00, 4, 3),
    "sweep_mode": (0x00, 3, 1),
    "sweep_shifts": (0x00, 0, 3),
    "on_off3": (0x0A, 7, 1),
    "length3": (0x0B, 0, 8),
    "level3": (0x0C, 5, 2),
    "length4": (0x10, 0, 6),
    "env_init4": (0x11, 4, 4),
    "env_mode4": (0x11, 3, 1),
    "env_steps4": (0x11, 0, 3),
    "poly_freq": (0x12, 4, 4),
    "poly_step": (0x12, 3, 1),
    "poly_div": (0x12, 0, 3),
    "so1_level": (0x14, 0, 3),
    "vin_so1": (0x14, 3, 1),
    "so2_level": (0x14, 4, 3),
    "vin_so2": (0x14, 7, 1),
    "global_on": (0x16, 7, 1),
}
for _ch, _base in ((1, 0x01), (2, 0x06)):
    _FIELDS[f"duty{_ch}"] = (_base, 6, 2)
    _FIELDS[f"length{_ch}"] = (_base, 0, 6)
    _FIELDS[f"env_init{_ch}"] = (_base + 1, 4, 4)
    _FIELDS[f"env_mode{_ch}"] = (_base + 1, 3, 1)
    _FIELDS[f"env_steps{_ch}"] = (_base + 1, 0, 3)
for _ch, _control in ((1, _NR14), (2, _NR24), (3, _NR34), (4, _NR44)):
    _FIELDS[f"cons{_ch}"] = (_control, 6, 1)
    _FIELDS[f"restart{_ch}"] = (_control, 7, 1)
    _FIELDS[f"sound{_ch}_to_so1"] = (0x15, _ch - 1, 1)
    _FIELDS[f"sound{_ch}_to_so2"] = (0x15, _ch + 3, 1)
    _FIELDS[f"sound{_ch}_on"] = (0x16, _ch - 1, 1)

_FREQ = "frequency"
_FREQ_LOW = {1: 0x03, 2: 0x08, 3: 0x0D}

_LINES: dict[int, tuple[str, ...]] = {
    0: ("global_on", "vin_so1", "vin_so2", "so1_level", "so2_level"),
    1: (
        "sweep_time", "sweep_mode", "sweep_shifts", "duty1", "length1",
        "env_init1", "env_mode1", "env_steps1", _FREQ, "cons1",
        "sound1_to_so1", "sound1_to_so2", "sound1_on",
    ),
    2: (
        "duty2", "length2", "env_init2", "env_mode2", "env_steps2", _FREQ,
        "cons2", "sound2_to_so1", "sound2_to_so2", "sound2_on",
    ),
    3: (
        "on_off3", "length3", "level3", _FREQ, "cons3",
        "sound3_to_so1", "sound3_to_so2", "sound3_on",
    ),
    4: (
        "length4", "env_init4", "env_mode4", "env_steps4", "poly_freq",
        "poly_step", "poly_div", "cons4", "sound4_to_so1", "sound4_to_so2",
        "sound4_on",
    ),
}


class SoundRegisters:
    """Shadow copy of the sound registers.

    Every byte sent to the hardware is recorded in :attr:`writes` as an
    ``(address, value)`` pair and passed to ``on_write`` if one is given.
    """

    def __init__(
        self,
        data: bytes | None = None,
        on_write: Callable[[int, int], None] | None = None,
    ) -> None:
        raw = DEFAULT_REGISTERS if data is None else bytes(data)
        if len(raw) != REGISTER_COUNT:
            raise ValueError(f"expected {REGISTER_COUNT} register bytes")
        self._data = bytearray(raw)
        self._on_write = on_write
        self.writes: list[tuple[int, int]] = []

    def register_bytes(self) -> bytes:
        """The current register image, 0xFF10 first."""
        return bytes(self._data)

    def _out(self, offset: int, value: int | None = None) -> None:
        byte = self._data[offset] if value is None else value & 0xFF
        address = PORT_BASE + offset
        self.writes.append((address, byte))
        if self._on_write is not None:
            self._on_write(address, byte)

    def _flush(self, offsets: Iterable[int]) -> None:
        for offset in offsets:
            self._out(offset)

    def _get(self, name: str) -> int:
        offset, shift, width = _FIELDS[name]
        return (self._data[offset] >> shift) & ((1 << width) - 1)

    def _set(self, name: str, value: int) -> None:
        offset, shift, width = _FIELDS[name]
        mask = ((1 << width) - 1) << shift
        self._data[offset] = (self._data[offset] & ~mask) | ((value << shift) & mask)

    @staticmethod
    def _field(mode: int, line: int) -> str | None:
        if mode in _FREQ_LOW and line == FREQUENCY:
            return _FREQ
        lines = _LINES.get(mode, ())
        return lines[line] if 0 <= line < len(lines) else None

    def current_value(self, mode: int, line: int) -> int:
        """Value of a parameter line of a mode, or 0 for an unknown line."""
        field = self._field(mode, line)
        if field is None:
            return 0
        if field == _FREQ:
            low = _FREQ_LOW[mode]
            return ((self._data[low + 1] & 0x07) << 8) + self._data[low]
        return self._get(field)

    def _set_frequency(self, mode: int, value: int) -> None:
        low = _FREQ_LOW[mode]
        self._data[low] = value & 0xFF
        self._data[low + 1] = (self._data[low + 1] & ~0x07) | ((value >> 8) & 0x07)
        self._flush((low, low + 1))

    def _restart(self, channels: Iterable[int], value: int) -> None:
        channels = tuple(channels)
        for ch in channels:
            self._set(f"restart{ch}", value)
        for ch in channels:
            self._out(_FIELDS[f"restart{ch}"][0])
        for ch in channels:
            self._set(f"restart{ch}", 0)

    def update_value(self, mode: int, line: int, value: int) -> None:
        """Set a parameter and send the register holding it.

        The value is cut to the width of its field. ``FREQUENCY`` on mode 0
        sets channels 1 to 3; ``PLAY`` restarts a channel, or on mode 0 all
        four, after sending its frequency again. Unknown lines are ignored.
        """
        value &= 0xFFFF
        if line == PLAY and mode in _LINES:
            channels = (1, 2, 3, 4) if mode == 0 else (mode,)
            for ch in channels:
                if ch in _FREQ_LOW:
                    self.update_value(ch, FREQUENCY, self.current_value(ch, FREQUENCY))
            self._restart(channels, value)
            return
        if mode == 0 and line == FREQUENCY:
            for ch in (1, 2, 3):
                self.update_value(ch, FREQUENCY, value)
            return
        field = self._field(mode, line)
        if field is None:
            return
        if field == _FREQ:
            self._set_frequency(mode, value)
        else:
            self._set(field, value)
            self._out(_FIELDS[field][0])

    def dump_registers(self) -> list[str]:
        """Screen rows listing the used registers two to a row, in hex."""
        rows = [f" Register Dump", ""]
        pairs = [_LIVE_OFFSETS[i:i + 2] for i in range(0, len(_LIVE_OFFSETS), 2)]
        for pair in pairs:
            names = " 0xFF" + "-".join(f"{PORT_BASE + o & 0xFF:02X}" for o in pair)
            values = "-".join(f"{self._data[o]:02X}" for o in pair)
            rows.append(f"{names:<15}{values}")
        return rows


class SoundEditor:
    """Joypad-driven editor showing one page of parameters at a time.

    It starts on mode 1. Creating it switches the sound controller on and
    sends the whole register image. ``delay`` is called with the pause in
    milliseconds wherever the editor waits.
    """

    def __init__(
        self,
        registers: SoundRegisters | None = None,
        delay: Callable[[int], None] | None = None,
    ) -> None:
        self.registers = SoundRegisters() if registers is None else registers
        self._delay = delay if delay is not None else (lambda ms: None)
        self.mode = 1
        self.line = 0
        self.dump: list[str] | None = None
        self.registers._out(_NR52, 0x80)
        self.registers._flush(_LIVE_OFFSETS)

    @property
    def params(self) -> tuple[Param, ...]:
        """The parameters of the current page."""
        return PAGES[self.mode][1]

    def screen(self) -> list[str]:
        """The current page: title, a blank row, then one row per parameter."""
        title, params = PAGES[self.mode]
        rows = [f" {title}", ""]
        for index, param in enumerate(params):
            marker = ARROW if index == self.line else " "
            value = self.registers.current_value(self.mode, index)
            rows.append(f"{marker}{param.name:<14}{value}")
        return rows

    def _play_music(self) -> None:
        for frequency in music_frequencies():
            if frequency is not None:
                self.registers.update_value(self.mode, FREQUENCY, frequency)
                self.registers.update_value(self.mode, PLAY, 1)
            self._delay(500)

    def press(self, buttons: int) -> None:
        """Handle one reading of the joypad.

        Up and down move the cursor, wrapping around. Left and right change
        the value by one, by ten with A, or to its limit with B. Start
        restarts the channel, or with A plays the tune. Select moves to the
        next mode, or with A stores a register dump in :attr:`dump`.
        """
        pressed = Button(buttons)
        last = len(self.params) - 1
        regs = self.registers
        if Button.UP in pressed:
            self.line = last if self.line == 0 else self.line - 1
        elif Button.DOWN in pressed:
            self.line = 0 if self.line == last else self.line + 1
        elif Button.LEFT in pressed:
            value = regs.current_value(self.mode, self.line)
            if value > 0:
                if Button.A in pressed:
                    value = max(value, 10) - 10
                elif Button.B in pressed:
                    value = 0
                else:
                    value -= 1
                regs.update_value(self.mode, self.line, value)
        elif Button.RIGHT in pressed:
            value = regs.current_value(self.mode, self.line)
            top = self.params[self.line].max
            if value < top:
                if Button.A in pressed:
                    value = min(value + 10, top)
                elif Button.B in pressed:
                    value = top
                else:
                    value += 1
                regs.update_value(self.mode, self.line, value)
        elif Button.START in pressed:
            if Button.A in pressed:
                self._play_music()
            else:
                regs.update_value(self.mode, PLAY, 1)
        elif Button.SELECT in pressed:
            if Button.A in pressed:
                self.dump = regs.dump_registers()
            else:
                self.mode = (self.mode + 1) % NB_MODES
            self.line = 0
            return
        self._delay(250)