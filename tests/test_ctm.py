import pytest

from pdfdraw.ctm import CurTransMat, TransformKind, product, write_transforms
from pdfdraw.geometry import Position
from pdfdraw.ops import Operation, OperationWriter


def test_basic_ctm_combine():
    a = CurTransMat.position(Position(10.0, 10.0))
    b = CurTransMat.rotate(90.0)
    c = CurTransMat.scale(2.0, 2.0)

    result = product([a, b, c])

    assert result.kind is TransformKind.RAW
    assert result.to_operands() == pytest.approx(
        [2.3849761e-8, 2.0, -2.0, 2.3849761e-8, -20.0, 20.0], abs=1e-6
    )


def test_high_position():
    a = CurTransMat.position(Position(10.0, 700.0))
    b = CurTransMat.scale(2.0, 2.0)

    result = product([a, b])

    assert result.to_operands() == pytest.approx([2.0, 0.0, 0.0, 2.0, 20.0, 1400.0])


def test_mul_matches_product():
    a = CurTransMat.position(Position(10.0, 10.0))
    b = CurTransMat.rotate(90.0)
    assert (a * b).to_operands() == pytest.approx(product([a, b]).to_operands())


def test_empty_product_is_identity():
    assert product([]) == CurTransMat.raw([1, 0, 0, 1, 0, 0])


def test_identity_is_neutral():
    t = CurTransMat.raw([1.5, 0.5, -0.5, 2.0, 3.0, 4.0])
    assert (CurTransMat.identity() * t).to_operands() == pytest.approx(t.to_operands())
    assert (t * CurTransMat.identity()).to_operands() == pytest.approx(t.to_operands())


def test_position_operands():
    t = CurTransMat.position(Position(3.0, 7.0))
    assert t.to_operands() == [1.0, 0.0, 0.0, 1.0, 3.0, 7.0]


def test_scale_operands():
    assert CurTransMat.scale(4.0, 5.0).to_operands() == [4.0, 0.0, 0.0, 5.0, 0.0, 0.0]


def test_matrix_round_trip():
    t = CurTransMat.raw([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    assert CurTransMat.from_matrix(t.to_matrix()) == t


def test_raw_requires_six_numbers():
    with pytest.raises(ValueError):
        CurTransMat.raw([1.0, 2.0, 3.0])


def test_default_is_identity():
    assert CurTransMat() == CurTransMat.identity()
    assert CurTransMat().to_operands() == [1.0, 0.0, 0.0, 1.0, 0.0, 0.0]


def test_write_emits_cm():
    writer = OperationWriter()
    CurTransMat.scale(2.0, 3.0).write(writer)
    assert writer.operations == [Operation("cm", [2.0, 0.0, 0.0, 3.0, 0.0, 0.0])]


def test_write_transforms_emits_single_combined_op():
    writer = OperationWriter()
    transforms = [CurTransMat.scale(2.0, 2.0), CurTransMat.position(Position(5.0, 6.0))]
    write_transforms(transforms, writer)
    assert len(writer.operations) == 1
    assert writer.operations[0].operator == "cm"
    assert writer.operations[0].operands == pytest.approx(product(transforms).to_operands())