import pytest

from dsworkbench.huffman_codes import (
    HuffmanNode,
    build_huffman_tree,
    format_codes,
    huffman_codes,
    main,
)

SYMBOLS = "abcdef"
FREQS = [5, 9, 12, 13, 16, 45]


def _decode(root, bits):
    out = []
    node = root
    for bit in bits:
        node = node.left if bit == "0" else node.right
        if node.is_leaf():
            out.append(node.data)
            node = root
    return "".join(out)


def test_root_frequency_is_total():
    root = build_huffman_tree(SYMBOLS, FREQS)
    assert root.freq == sum(FREQS)


def test_every_symbol_gets_a_code():
    codes = huffman_codes(build_huffman_tree(SYMBOLS, FREQS))
    assert sorted(codes) == sorted(SYMBOLS)


def test_codes_are_prefix_free():
    codes = list(huffman_codes(build_huffman_tree(SYMBOLS, FREQS)).values())
    for first in codes:
        for second in codes:
            if first is not second:
                assert not second.startswith(first)


def test_worked_example_codes():
    codes = huffman_codes(build_huffman_tree(SYMBOLS, FREQS))
    assert codes["f"] == "0"
    assert codes["a"] == "1100"


def test_heaviest_symbol_has_shortest_code():
    codes = huffman_codes(build_huffman_tree(SYMBOLS, FREQS))
    assert len(codes["f"]) == min(len(code) for code in codes.values())


def test_encode_decode_round_trip():
    root = build_huffman_tree(SYMBOLS, FREQS)
    codes = huffman_codes(root)
    message = "facedbadfeed"
    bits = "".join(codes[ch] for ch in message)
    assert _decode(root, bits) == message


def test_internal_nodes_are_marked():
    root = build_huffman_tree(SYMBOLS, FREQS)
    assert not root.is_leaf()
    assert root.data == "$"


def test_single_symbol_is_leaf_with_empty_code():
    root = build_huffman_tree("x", [3])
    assert root.is_leaf()
    assert huffman_codes(root) == {"x": ""}


def test_format_codes_lines_match_codes():
    root = build_huffman_tree(SYMBOLS, FREQS)
    codes = huffman_codes(root)
    lines = format_codes(root).splitlines()
    assert sorted(lines) == sorted(f"{s}: {c}" for s, c in codes.items())


def test_is_leaf():
    leaf = HuffmanNode("a", 1)
    assert leaf.is_leaf()
    assert not HuffmanNode("$", 2, leaf, HuffmanNode("b", 1)).is_leaf()


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        build_huffman_tree("ab", [1])


def test_empty_rejected():
    with pytest.raises(ValueError):
        build_huffman_tree("", [])


def test_main_prints_header(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Character Huffman Codes:"
    assert len(out) == 1 + len(SYMBOLS)