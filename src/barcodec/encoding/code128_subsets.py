"""Code128 character subset selection.

Code128 data is written in one of three subsets: A (ASCII 0-95, the
control characters and uppercase), B (ASCII 32-127, printable
characters) and C (pairs of digits). Function characters and subset
switches are given in the input as these code points:

    ======  ========  =====================
    FNC1    U+0179    ``Ź``
    FNC2    U+017A    ``ź``
    FNC3    U+017B    ``Ż``
    FNC4    U+017C    ``ż``
    SHIFT   U+017D    ``Ž``
    A       U+00C0    ``À``
    B       U+0181    ``Ɓ``
    C       U+0106    ``Ć``
    ======  ========  =====================

Data starting with one of the subset markers is encoded exactly as the
markers say (:func:`explicit_subsets`). Any other data is partitioned
automatically (:func:`select_subsets`) by a greedy state machine which
packs long digit runs into subset C and uses SHIFT for single characters
of the other alphanumeric subset.
"""
import logging
from collections import namedtuple

from .encoding import DIGITS
from ..errors import UnsupportedCombination


logger = logging.getLogger(__name__)

FNC1 = "Ź"
FNC2 = "ź"
FNC3 = "Ż"
FNC4 = "ż"
SHIFT = "Ž"

MARKERS = {"À": "A", "Ɓ": "B", "Ć": "C"}

FUNCTION_NAMES = {
    FNC1: "FNC1", FNC2: "FNC2", FNC3: "FNC3", FNC4: "FNC4", SHIFT: "SHIFT"
}

FUNCTION_VALUES = {
    "A": {FNC1: 102, FNC2: 97, FNC3: 96, FNC4: 101},
    "B": {FNC1: 102, FNC2: 97, FNC3: 96, FNC4: 100},
    "C": {FNC1: 102},
}

START_VALUES = {"A": 103, "B": 104, "C": 105}

# symbol value switching from the outer key subset to the inner one
SWITCH_VALUES = {
    "A": {"B": 100, "C": 99},
    "B": {"A": 101, "C": 99},
    "C": {"A": 101, "B": 100},
}

SHIFT_VALUE = 98

# Digit run lengths worth switching to subset C. A run in the middle of
# the data pays for switching in and out again, a run touching either
# end of the data only for one switch.
C_RUN_AT_END = 4
C_RUN_IN_MIDDLE = 6


Symbol = namedtuple("Symbol", "subset text value")
Symbol.__doc__ = """One Code128 symbol: subset it's emitted in, the data or
function it stands for and its symbol value"""

SelectorState = namedtuple("SelectorState", "subset position")


def char_value(subset, char):
    """Symbol value of single character in subset A or B

    :param str subset:  "A" or "B"
    :param str char:    A character
    :return:            Symbol value or None if subset can't encode char"""
    functions = FUNCTION_VALUES[subset]
    if char in functions:
        return functions[char]
    code = ord(char)
    if subset == "A" and code < 96:
        return code + 64 if code < 32 else code - 32
    if subset == "B" and 32 <= code < 128:
        return code - 32
    return None


def describe(char):
    return FUNCTION_NAMES.get(char, repr(char))


def data_length(data):
    """Number of data characters, not counting subset markers, SHIFT and
    FNC1 in the first position (GS1-128 flag)"""
    chars = [char for char in data if char not in MARKERS and char != SHIFT]
    if chars and chars[0] == FNC1:
        return len(chars) - 1
    return len(chars)


def digit_run(data, position):
    end = position
    while end < len(data) and data[end] in DIGITS:
        end += 1
    return end - position


def exclusive_subset(char):
    """Returns "A" for characters only subset A encodes, "B" for those
only in subset B and None for characters both of them have"""
    code = ord(char)
    if code < 32:
        return "A"
    if 96 <= code < 128:
        return "B"
    return None


def next_exclusive_subset(data, position):
    for char in data[position:]:
        subset = exclusive_subset(char)
        if subset is not None:
            return subset
    return None


def preferred_subset(data, position):
    """Alphanumeric subset for data from position on: A if a control
character comes before any lowercase one, B otherwise"""
    return next_exclusive_subset(data, position) or "B"


def start_subset(data):
    position = 0
    while position < len(data) and data[position] == FNC1:
        position += 1
    run = digit_run(data, position)
    if run >= C_RUN_AT_END or (run == 2 and position + run == len(data)):
        return "C"
    return preferred_subset(data, 0)


def switch_symbol(subset, target):
    return Symbol(subset, "CODE " + target, SWITCH_VALUES[subset][target])


def transition(state, data):
    """Moves the selector over the next piece of data

    :param SelectorState state: Current subset and position in data
    :param str data:            Validated data
    :return:                    Tuple of list of emitted symbols and the
                                next state"""
    subset, position = state
    char = data[position]

    if subset == "C":
        if char == FNC1:
            symbol = Symbol("C", "FNC1", FUNCTION_VALUES["C"][FNC1])
            return [symbol], SelectorState("C", position + 1)
        if digit_run(data, position) >= 2:
            pair = data[position:position + 2]
            return [Symbol("C", pair, int(pair))], SelectorState("C", position + 2)
        target = preferred_subset(data, position)
        return [switch_symbol("C", target)], SelectorState(target, position)

    run = digit_run(data, position)
    threshold = C_RUN_AT_END if position + run == len(data) else C_RUN_IN_MIDDLE
    if run >= threshold and run % 2 == 0:
        return [switch_symbol(subset, "C")], SelectorState("C", position)

    # odd digit runs leave their first digit in the current subset
    value = char_value(subset, char)
    if value is not None:
        symbol = Symbol(subset, FUNCTION_NAMES.get(char, char), value)
        return [symbol], SelectorState(subset, position + 1)

    other = "B" if subset == "A" else "A"
    shifted = Symbol(other, char, char_value(other, char))
    if next_exclusive_subset(data, position + 1) == subset:
        shift = Symbol(subset, "SHIFT", SHIFT_VALUE)
        return [shift, shifted], SelectorState(subset, position + 1)
    return [switch_symbol(subset, other)], SelectorState(other, position)


def select_subsets(data):
    """Partitions data into subset runs

    :param str data:    Validated data without subset markers or SHIFT
    :return:            List of symbols, starting with the start symbol"""
    subset = start_subset(data)
    logger.debug("Code128 starts in subset %s for %d characters",
                 subset, len(data))
    symbols = [Symbol(subset, "START " + subset, START_VALUES[subset])]
    state = SelectorState(subset, 0)
    while state.position < len(data):
        emitted, state = transition(state, data)
        symbols.extend(emitted)
    return symbols


def explicit_subsets(data, symbology="Code128"):
    """Encodes data in the subsets chosen by its markers

    :param str data:        Data starting with a subset marker
    :param str symbology:   Name used in error messages
    :return:                List of symbols, starting with the start symbol
    :raises UnsupportedCombination: if a character isn't available in the
                                    subset chosen for it"""
    subset = MARKERS[data[0]]
    symbols = [Symbol(subset, "START " + subset, START_VALUES[subset])]
    position = 1
    while position < len(data):
        char = data[position]
        if char in MARKERS:
            target = MARKERS[char]
            if target == subset:
                raise UnsupportedCombination(
                    symbology, "already in subset {}".format(subset), position
                )
            symbols.append(switch_symbol(subset, target))
            subset = target
            position += 1
        elif subset == "C":
            if char == FNC1:
                symbols.append(Symbol("C", "FNC1", FUNCTION_VALUES["C"][FNC1]))
                position += 1
            elif char in DIGITS:
                pair = data[position:position + 2]
                if len(pair) < 2 or pair[1] not in DIGITS:
                    raise UnsupportedCombination(
                        symbology, "unpaired digit in subset C", position
                    )
                symbols.append(Symbol("C", pair, int(pair)))
                position += 2
            else:
                raise UnsupportedCombination(
                    symbology,
                    "{} is not available in subset C".format(describe(char)),
                    position
                )
        elif char == SHIFT:
            other = "B" if subset == "A" else "A"
            shifted = data[position + 1:position + 2]
            value = None
            if shifted and shifted not in MARKERS and shifted != SHIFT:
                value = char_value(other, shifted)
            if value is None:
                raise UnsupportedCombination(
                    symbology,
                    "SHIFT must be followed by a subset {} character".format(
                        other
                    ),
                    position
                )
            symbols.append(Symbol(subset, "SHIFT", SHIFT_VALUE))
            symbols.append(Symbol(other, shifted, value))
            position += 2
        else:
            value = char_value(subset, char)
            if value is None:
                raise UnsupportedCombination(
                    symbology,
                    "{} is not available in subset {}".format(
                        describe(char), subset
                    ),
                    position
                )
            symbols.append(Symbol(subset, FUNCTION_NAMES.get(char, char), value))
            position += 1
    return symbols
