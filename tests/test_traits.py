import pytest

from remotia.traits import (
    BorrowFrameProperties,
    BorrowMutFrameProperties,
    FrameError,
    FrameProcessor,
    FrameProperties,
    OptionalFrameData,
    PullableFrameProperties,
)


@pytest.mark.parametrize(
    "interface",
    [
        FrameProcessor,
        FrameProperties,
        PullableFrameProperties,
        OptionalFrameData,
        BorrowFrameProperties,
        BorrowMutFrameProperties,
        FrameError,
    ],
)
def test_interfaces_cannot_be_instantiated(interface):
    with pytest.raises(TypeError):
        interface()