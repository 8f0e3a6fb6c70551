# -*- coding: utf-8 -*-
"""
GeoResource Base Tests - Unbound defaults, identity, metadata, and copying.

Exercises the base contract without any backend: unbound degenerate
values, basename decomposition, metadata store semantics, value-copy
independence, and atomic assignment.

Dependencies
------------
pytest

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import copy

import pytest
from affine import Affine

from geores.exceptions import CRSError, GeoresError, ValidationError
from geores.models import Point
from geores.resource.base import GeoResource


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def resource():
    """GeoResource with a path identifier and a few metadata items."""
    res = GeoResource('/data/scenes/scene_001.tif')
    res.set_meta({'SENSOR': 'OLI', 'CLOUD_COVER': '12.5'})
    return res


class _GarbageProjection(GeoResource):
    def projection(self):
        return 'this is not well known text'


class _UncopyableResource(GeoResource):
    def _copy_state(self, memo=None):
        raise RuntimeError("copy failed")


# ---------------------------------------------------------------------------
# Unbound defaults
# ---------------------------------------------------------------------------

class TestUnbound:
    """Test the degenerate values of a resource with no backend."""

    def test_defaults(self):
        res = GeoResource()
        assert res.filename() == ''
        assert res.basename() == ''
        assert res.format() == ''
        assert res.xsize() == 0
        assert res.ysize() == 0
        assert res.projection() == ''
        assert res.affine() == Affine.identity()

    def test_none_identifier_is_empty(self):
        assert GeoResource(None).filename() == ''

    def test_geoloc_passthrough(self):
        res = GeoResource()
        assert res.geoloc(12.5, -3.25) == Point(12.5, -3.25)

    def test_corners_collapse_to_origin(self):
        res = GeoResource()
        for corner in res.corners():
            assert corner == Point(0.0, 0.0)
        assert res.min_xy() == Point(0.0, 0.0)
        assert res.max_xy() == Point(0.0, 0.0)
        assert res.bounds() == (0.0, 0.0, 0.0, 0.0)

    def test_resolution_identity(self):
        assert GeoResource().resolution() == (1.0, 1.0)

    def test_srs_undefined(self):
        res = GeoResource()
        with pytest.raises(CRSError, match="empty"):
            res.srs()
        assert res.has_srs() is False

    def test_srs_malformed(self):
        res = _GarbageProjection()
        with pytest.raises(CRSError):
            res.srs()
        assert res.has_srs() is False

    def test_crs_error_is_recoverable(self):
        res = GeoResource()
        try:
            res.srs()
        except ValueError as e:
            assert isinstance(e, GeoresError)
        else:
            pytest.fail("srs() should report an undefined CRS")

    def test_repr(self):
        assert '<unbound>' in repr(GeoResource())


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

class TestIdentity:
    """Test filename and basename accessors."""

    def test_filename_verbatim(self, resource):
        assert resource.filename() == '/data/scenes/scene_001.tif'

    def test_basename(self, resource):
        assert resource.basename() == 'scene_001.tif'

    def test_basename_no_directory(self):
        assert GeoResource('scene.tif').basename() == 'scene.tif'

    def test_basename_nonexistent_path(self):
        res = GeoResource('/no/such/dir/anywhere/file.jp2')
        assert res.basename() == 'file.jp2'


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

class TestMetadata:
    """Test get/set/copy metadata semantics."""

    def test_round_trip(self):
        res = GeoResource()
        res.set_meta('PLATFORM', 'Landsat-8')
        assert res.meta('PLATFORM') == 'Landsat-8'

    def test_missing_key_is_none(self, resource):
        assert resource.meta('NOT_THERE') is None

    def test_missing_key_default(self, resource):
        assert resource.meta('NOT_THERE', '') == ''

    def test_empty_value_distinct_from_absent(self):
        res = GeoResource().set_meta('EMPTY', '')
        assert res.meta('EMPTY') == ''
        assert res.meta('ABSENT') is None

    def test_keys_case_sensitive(self):
        res = GeoResource().set_meta('band', '1').set_meta('BAND', '2')
        assert res.meta('band') == '1'
        assert res.meta('BAND') == '2'

    def test_overwrite(self, resource):
        resource.set_meta('SENSOR', 'TIRS')
        assert resource.meta('SENSOR') == 'TIRS'

    def test_idempotent(self):
        res = GeoResource()
        res.set_meta('K', 'v').set_meta('K', 'v')
        assert res.meta('K') == 'v'
        assert len(res.metadata()) == 1

    def test_set_meta_returns_self(self):
        res = GeoResource()
        assert res.set_meta('A', '1') is res
        assert res.set_meta({'B': '2'}) is res

    def test_bulk(self):
        res = GeoResource().set_meta({'A': '1', 'B': '2', 'C': '3'})
        assert res.metadata() == {'A': '1', 'B': '2', 'C': '3'}

    def test_values_stored_as_str(self):
        res = GeoResource().set_meta('GAIN', 0.5)
        assert res.meta('GAIN') == '0.5'

    def test_non_string_key_rejected(self):
        res = GeoResource()
        with pytest.raises(ValidationError):
            res.set_meta(5, 'x')

    def test_bulk_rejects_without_partial_write(self):
        res = GeoResource()
        with pytest.raises(ValidationError):
            res.set_meta({'GOOD': '1', 7: 'bad'})
        assert res.metadata() == {}

    def test_missing_value_rejected(self):
        with pytest.raises(ValidationError, match="missing value"):
            GeoResource().set_meta('KEY')

    def test_mapping_with_value_rejected(self):
        with pytest.raises(ValidationError):
            GeoResource().set_meta({'A': '1'}, 'extra')

    def test_metadata_returns_copy(self, resource):
        snapshot = resource.metadata()
        snapshot['SENSOR'] = 'changed'
        assert resource.meta('SENSOR') == 'OLI'

    def test_copy_meta_merges(self, resource):
        target = GeoResource('other.tif')
        target.set_meta({'SENSOR': 'MSI', 'ONLY_HERE': 'kept'})
        target.copy_meta(resource)
        assert target.meta('SENSOR') == 'OLI'
        assert target.meta('CLOUD_COVER') == '12.5'
        assert target.meta('ONLY_HERE') == 'kept'

    def test_copy_meta_leaves_identity(self, resource):
        target = GeoResource('other.tif')
        assert target.copy_meta(resource) is target
        assert target.filename() == 'other.tif'


# ---------------------------------------------------------------------------
# Copy and assignment
# ---------------------------------------------------------------------------

class TestCopy:
    """Test value-copy and atomic assignment."""

    @pytest.mark.parametrize('make_copy', [
        lambda r: r.copy(),
        copy.copy,
        copy.deepcopy,
    ])
    def test_copy_independent(self, resource, make_copy):
        clone = make_copy(resource)
        assert type(clone) is GeoResource
        assert clone.filename() == resource.filename()
        assert clone.metadata() == resource.metadata()

        clone.set_meta('SENSOR', 'changed').set_meta('NEW', '1')
        assert resource.meta('SENSOR') == 'OLI'
        assert resource.meta('NEW') is None

    def test_assign(self, resource):
        target = GeoResource('old.tif').set_meta('STALE', 'yes')
        assert target.assign(resource) is target
        assert target.filename() == resource.filename()
        assert target.metadata() == resource.metadata()
        assert target.meta('STALE') is None

        target.set_meta('SENSOR', 'changed')
        assert resource.meta('SENSOR') == 'OLI'

    def test_assign_self(self, resource):
        before = resource.metadata()
        resource.assign(resource)
        assert resource.metadata() == before

    def test_assign_wrong_type_unchanged(self):
        target = GeoResource('keep.tif').set_meta('K', 'v')
        with pytest.raises(ValidationError):
            target.assign('not a resource')
        assert target.filename() == 'keep.tif'
        assert target.meta('K') == 'v'

    def test_assign_failure_is_atomic(self):
        target = GeoResource('keep.tif').set_meta('K', 'v')
        source = _UncopyableResource('source.tif').set_meta('K', 'other')
        with pytest.raises(RuntimeError):
            target.assign(source)
        assert target.filename() == 'keep.tif'
        assert target.metadata() == {'K': 'v'}
