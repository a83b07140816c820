""" 최적화 요청 옵션 파싱 테스트 """
import pytest

from app.core.errors import InvalidDirectiveError, ProcessingError
from app.schemas.requests import TransformDirective, is_true, parse_int


def test_defaults_when_no_fields():
    directive = TransformDirective.from_form()

    assert directive.format == 'webp'
    assert directive.quality == 80
    assert directive.fit == 'inside'
    assert directive.width is None and directive.height is None
    assert directive.rotate == 0
    assert not (directive.grayscale or directive.flip or directive.flop)
    assert not directive.wants_resize
    assert directive.media_type == 'image/webp'


def test_blank_fields_fall_back_to_defaults():
    directive = TransformDirective.from_form(format='', quality='', fit='', rotate='', width='')

    assert directive.format == 'webp'
    assert directive.quality == 80
    assert directive.fit == 'inside'
    assert directive.rotate == 0


@pytest.mark.parametrize('raw, expected', [
    ('80', 80),
    ('80px', 80),
    (' 42', 42),
    ('12.9', 12),
    ('-7', -7),
    ('abc', None),
    (None, None),
])
def test_parse_int_reads_leading_integer(raw, expected):
    assert parse_int(raw) == expected


def test_quality_is_clamped():
    assert TransformDirective.from_form(quality='150').quality == 100
    assert TransformDirective.from_form(quality='0').quality == 1
    assert TransformDirective.from_form(quality='-20').quality == 1


def test_non_numeric_quality_is_processing_error():
    with pytest.raises(ProcessingError):
        TransformDirective.from_form(quality='high')


def test_dimensions():
    directive = TransformDirective.from_form(width='320', height='abc')
    assert directive.width == 320
    assert directive.height is None
    assert directive.wants_resize

    assert not TransformDirective.from_form(width='0', height='0').wants_resize


def test_negative_dimension_is_processing_error():
    with pytest.raises(ProcessingError):
        TransformDirective.from_form(width='-5')


def test_rotate_parsing():
    assert TransformDirective.from_form(rotate='90').rotate == 90
    assert TransformDirective.from_form(rotate='-45deg').rotate == -45
    with pytest.raises(ProcessingError):
        TransformDirective.from_form(rotate='left')


@pytest.mark.parametrize('raw, expected', [
    ('true', True),
    ('True', False),
    ('1', False),
    ('on', False),
    ('', False),
    (None, False),
])
def test_boolean_flags_require_literal_true(raw, expected):
    assert is_true(raw) is expected
    directive = TransformDirective.from_form(grayscale=raw, flip=raw, flop=raw)
    assert directive.grayscale is expected
    assert directive.flip is expected
    assert directive.flop is expected


def test_unknown_format_is_rejected():
    with pytest.raises(InvalidDirectiveError) as excinfo:
        TransformDirective.from_form(format='bmp')

    assert excinfo.value.status_code == 400
    assert excinfo.value.field == 'format'


def test_unknown_fit_is_rejected():
    with pytest.raises(InvalidDirectiveError) as excinfo:
        TransformDirective.from_form(fit='stretch')

    assert excinfo.value.field == 'fit'


def test_format_and_fit_are_trimmed():
    directive = TransformDirective.from_form(format=' png ', fit='cover\n')

    assert directive.format == 'png'
    assert directive.fit == 'cover'
    assert directive.media_type == 'image/png'
