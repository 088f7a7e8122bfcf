import pytest

from src.platform.logging.loguru_io import LoguruIO
from src.platform.logging.loguru_io_config import MASK, MAX_CONTENT_LENGTH, custom_logger
from src.platform.logging.loguru_io_utils import (
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestMaskSensitive:
    def test_masks_quoted_values_in_reprs(self):
        masked = mask_sensitive("LoginRequest(email='a@b.c', password='hunter22')")

        assert 'hunter22' not in masked
        assert f"password='{MASK}'" in masked
        assert "email='a@b.c'" in masked

    def test_masks_dict_style_values(self):
        masked = mask_sensitive({'token': 'eyJhbGciOi', 'user_id': 1})

        assert 'eyJhbGciOi' not in masked
        assert "'user_id': 1" in masked

    def test_returns_original_object_when_nothing_to_mask(self):
        data = {'flight_id': 1}

        assert mask_sensitive(data) is data

    def test_should_mask_keyword(self):
        assert should_mask_keyword('Authorization', 'Bearer x') == MASK
        assert should_mask_keyword('origin', 'CGK') == 'CGK'


@pytest.mark.unit
class TestLoguruIO:
    def test_mask_sensitive_walks_nested_structures(self):
        io = LoguruIO(custom_logger)

        masked = io.mask_sensitive({'kwargs': {'password': 'hunter22', 'email': 'a@b.c'}})

        assert masked == {'kwargs': {'password': MASK, 'email': 'a@b.c'}}

    def test_decorated_function_reraises(self):
        @LoguruIO(custom_logger)
        def explode() -> None:
            raise ValueError('boom')

        with pytest.raises(ValueError, match='boom'):
            explode()

    async def test_decorated_coroutine_returns_value(self):
        @LoguruIO(custom_logger)
        async def add(a: int, b: int) -> int:
            return a + b

        assert await add(1, b=2) == 3


@pytest.mark.unit
class TestHelpers:
    def test_truncate_content(self):
        content = 'x' * (MAX_CONTENT_LENGTH + 5)

        truncated = truncate_content(content)

        assert truncated.startswith('x' * MAX_CONTENT_LENGTH)
        assert truncated.endswith('[truncated 5 chars]')
        assert truncate_content('short') == 'short'

    def test_normalize_args_kwargs_drops_unknown_keywords(self):
        def target(a, *, b):
            return a, b

        args, kwargs = normalize_args_kwargs(target, 1, 2, b=3, c=4)

        assert args == (1,)
        assert kwargs == {'b': 3}
