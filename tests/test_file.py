"""Unit tests for GettFile."""

import io
from datetime import datetime, timezone

import httpx
import pytest

from gett.exceptions import PreconditionError, RequestError
from gett.file import GettFile


@pytest.fixture
def file(mock_request):
    """A file in share 'abc123' with id 7 and no user attached."""
    return GettFile(filename='report.pdf', fileid=7, sharename='abc123', request=mock_request)


class TestAttributes:
    """Tests for construction and attribute rules."""

    def test_unset_attributes_are_none(self, mock_request):
        """Attributes not passed at construction stay None."""
        file = GettFile(filename='a.txt', request=mock_request)

        assert file.filename == 'a.txt'
        for name in ('fileid', 'downloads', 'readystate', 'url', 'download', 'size',
                     'created', 'sharename', 'put_upload_url', 'post_upload_url'):
            assert getattr(file, name) is None
        assert file.user is None
        assert file.has_user is False

    def test_default_request_is_created(self):
        """A Request is constructed when none is supplied."""
        from gett.request import Request

        file = GettFile(filename='a.txt')
        assert isinstance(file.request, Request)
        file.request.close()

    def test_scalar_attributes_are_read_only(self, file):
        """Reassigning a scalar attribute raises AttributeError."""
        with pytest.raises(AttributeError):
            file.filename = 'other.pdf'
        with pytest.raises(AttributeError):
            file.fileid = 8

        assert file.filename == 'report.pdf'
        assert file.fileid == 7

    def test_user_can_be_attached_later(self, file, logged_in_user):
        """The user collaborator is attachable after construction."""
        assert not file.has_user

        file.user = logged_in_user

        assert file.has_user
        assert file.user is logged_in_user

    def test_from_dict_flattens_upload_urls(self, mock_request):
        """Nested upload URLs become put_upload_url and post_upload_url."""
        file = GettFile.from_dict(
            {
                'fileid': 0,
                'filename': 'photo.jpg',
                'readystate': 'remote',
                'created': 1322847857,
                'size': 2048,
                'sharename': 'share1',
                'downloads': 3,
                'url': 'http://ge.tt/share1/v/0',
                'upload': {
                    'puturl': 'https://blobs.ge.tt/share1/0?put',
                    'posturl': 'https://blobs.ge.tt/share1/0?post',
                },
                'getturl': 'http://ge.tt/share1/v/0',
            },
            request=mock_request,
        )

        assert file.fileid == 0
        assert file.filename == 'photo.jpg'
        assert file.readystate == 'remote'
        assert file.downloads == 3
        assert file.put_upload_url == 'https://blobs.ge.tt/share1/0?put'
        assert file.post_upload_url == 'https://blobs.ge.tt/share1/0?post'
        assert not hasattr(file, 'getturl')

    def test_from_dict_keeps_values_uncoerced(self, mock_request):
        """Values are stored exactly as the service sent them."""
        file = GettFile.from_dict({'fileid': '3', 'size': '100'}, sharename='s', request=mock_request)

        assert file.fileid == '3'
        assert file.size == '100'
        assert file.sharename == 's'

    def test_from_dict_prefers_payload_sharename(self, mock_request):
        """The sharename argument only fills in a missing one."""
        file = GettFile.from_dict({'sharename': 'payload'}, sharename='arg', request=mock_request)

        assert file.sharename == 'payload'

    def test_created_at(self, mock_request):
        """created is exposed as an aware UTC datetime."""
        file = GettFile(created=0, request=mock_request)

        assert file.created_at == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert GettFile(request=mock_request).created_at is None


class TestSendFile:
    """Tests for send_file()."""

    def test_empty_contents_returns_false_without_request(self, file, mock_request):
        """Nothing to read means no HTTP call and a falsy result."""
        assert not file.send_file('https://blobs.ge.tt/put', '')
        assert file.send_file('https://blobs.ge.tt/put', b'') is False

        mock_request.put.assert_not_called()

    def test_bytes_are_put_once(self, file, mock_request):
        """A buffer is uploaded with exactly one PUT."""
        mock_request.put.return_value = httpx.Response(200)

        result = file.send_file('https://blobs.ge.tt/put', b'\x00\x01binary')

        assert result is True
        mock_request.put.assert_called_once_with('https://blobs.ge.tt/put', b'\x00\x01binary')

    def test_refused_put_returns_none(self, file, mock_request):
        """A refused upload is a soft failure distinct from False."""
        mock_request.put.return_value = None

        result = file.send_file('https://blobs.ge.tt/put', b'data')

        assert result is None
        mock_request.put.assert_called_once()

    def test_reads_path_as_raw_bytes(self, file, mock_request, tmp_path):
        """A path is read in binary mode without newline translation."""
        path = tmp_path / 'lines.txt'
        path.write_bytes(b'one\r\ntwo\r\n')
        mock_request.put.return_value = httpx.Response(200)

        assert file.send_file('https://blobs.ge.tt/put', str(path)) is True
        mock_request.put.assert_called_once_with('https://blobs.ge.tt/put', b'one\r\ntwo\r\n')

    def test_reads_path_with_encoding(self, file, mock_request, tmp_path):
        """An encoding reads the path as text and re-encodes it."""
        path = tmp_path / 'latin.txt'
        path.write_bytes('café\r\n'.encode('latin-1'))
        mock_request.put.return_value = httpx.Response(200)

        assert file.send_file('https://blobs.ge.tt/put', path, encoding='latin-1') is True
        mock_request.put.assert_called_once_with('https://blobs.ge.tt/put', 'café\n'.encode('latin-1'))

    def test_reads_binary_stream_with_encoding(self, file, mock_request):
        """An encoding decodes a binary stream with newline translation."""
        mock_request.put.return_value = httpx.Response(200)

        stream = io.BytesIO('café\r\n'.encode('latin-1'))
        assert file.send_file('https://blobs.ge.tt/put', stream, encoding='latin-1') is True
        mock_request.put.assert_called_once_with('https://blobs.ge.tt/put', b'caf\xe9\n')

    def test_reads_open_stream(self, file, mock_request):
        """A readable object is read to the end before uploading."""
        mock_request.put.return_value = httpx.Response(200)

        assert file.send_file('https://blobs.ge.tt/put', io.BytesIO(b'streamed')) is True
        mock_request.put.assert_called_once_with('https://blobs.ge.tt/put', b'streamed')

    def test_text_stream_is_encoded(self, file, mock_request):
        """Text read from a stream is encoded before uploading."""
        mock_request.put.return_value = httpx.Response(200)

        file.send_file('https://blobs.ge.tt/put', io.StringIO('héllo'))

        mock_request.put.assert_called_once_with('https://blobs.ge.tt/put', 'héllo'.encode('utf-8'))

    def test_missing_path_raises(self, file, mock_request, tmp_path):
        """An unreadable path propagates the OS error."""
        with pytest.raises(FileNotFoundError):
            file.send_file('https://blobs.ge.tt/put', str(tmp_path / 'missing.bin'))

        mock_request.put.assert_not_called()

    def test_works_without_sharename_or_user(self, mock_request):
        """send_file only needs the upload URL."""
        mock_request.put.return_value = httpx.Response(201)

        assert GettFile(request=mock_request).send_file('https://blobs.ge.tt/put', b'x') is True


class TestGetUploadUrl:
    """Tests for get_upload_url()."""

    def test_requires_user(self, file, mock_request):
        """Without a user no network call is made."""
        with pytest.raises(PreconditionError):
            file.get_upload_url()

        mock_request.get.assert_not_called()

    def test_returns_puturl(self, file, mock_request, logged_in_user):
        """The puturl field is returned unchanged."""
        file.user = logged_in_user
        mock_request.get.return_value = {'puturl': 'https://x/put/abc'}

        assert file.get_upload_url() == 'https://x/put/abc'
        mock_request.get.assert_called_once_with('/files/abc123/7/upload?accesstoken=tok123')
        logged_in_user.login.assert_not_called()

    def test_logs_in_once_when_needed(self, file, mock_request, logged_out_user):
        """An unauthenticated user logs in exactly once before the GET."""
        file.user = logged_out_user
        mock_request.get.return_value = {'puturl': 'https://x/put/abc'}

        file.get_upload_url()

        logged_out_user.login.assert_called_once_with()
        mock_request.get.assert_called_once_with('/files/abc123/7/upload?accesstoken=fresh456')

    def test_empty_response_raises(self, file, mock_request, logged_in_user):
        """A response without puturl raises RequestError naming the endpoint."""
        file.user = logged_in_user
        mock_request.get.return_value = {}

        with pytest.raises(RequestError) as exc_info:
            file.get_upload_url()

        assert '/files/abc123/7/upload' in str(exc_info.value)
        assert exc_info.value.endpoint == '/files/abc123/7/upload?accesstoken=tok123'

    def test_error_message_hides_access_token(self, file, mock_request, logged_in_user):
        """The message shows the path only; the full endpoint stays on the error."""
        file.user = logged_in_user
        mock_request.get.return_value = {}

        with pytest.raises(RequestError) as exc_info:
            file.get_upload_url()

        assert 'tok123' not in str(exc_info.value)
        assert exc_info.value.path == '/files/abc123/7/upload'

    def test_missing_response_raises(self, file, mock_request, logged_in_user):
        """A bodyless response raises RequestError."""
        file.user = logged_in_user
        mock_request.get.return_value = True

        with pytest.raises(RequestError):
            file.get_upload_url()


class TestDestroy:
    """Tests for destroy()."""

    def test_requires_user(self, file, mock_request):
        """Without a user no network call is made."""
        with pytest.raises(PreconditionError):
            file.destroy()

        mock_request.post.assert_not_called()

    def test_uses_user_access_token(self, file, mock_request, logged_in_user):
        """The endpoint carries the attached user's token."""
        file.user = logged_in_user
        mock_request.post.return_value = True

        assert file.destroy() is True
        mock_request.post.assert_called_once_with('/files/abc123/7/destroy?accesstoken=tok123')

    def test_logs_in_once_when_needed(self, file, mock_request, logged_out_user):
        """An unauthenticated user logs in before the POST."""
        file.user = logged_out_user
        mock_request.post.return_value = True

        file.destroy()

        logged_out_user.login.assert_called_once_with()
        mock_request.post.assert_called_once_with('/files/abc123/7/destroy?accesstoken=fresh456')

    def test_falsy_response_returns_false(self, file, mock_request, logged_in_user):
        """An unacknowledged deletion is a soft failure."""
        file.user = logged_in_user
        mock_request.post.return_value = None

        assert file.destroy() is False


class TestContents:
    """Tests for contents() and thumbnail()."""

    def test_contents_returns_body(self, make_request):
        """contents() returns the raw blob bytes."""
        seen = []

        def handler(request):
            seen.append(request.url.path)
            return httpx.Response(200, content=b'\x89PNG raw')

        file = GettFile(sharename='abc123', fileid=7, request=make_request(handler))

        assert file.contents() == b'\x89PNG raw'
        assert seen == ['/1/files/abc123/7/blob']

    def test_thumbnail_endpoint(self, make_request):
        """thumbnail() targets the blob/thumb endpoint."""
        seen = []

        def handler(request):
            seen.append(request.url.path)
            return httpx.Response(200, content=b'thumb')

        file = GettFile(sharename='abc123', fileid=7, request=make_request(handler))

        assert file.thumbnail() == b'thumb'
        assert seen == ['/1/files/abc123/7/blob/thumb']

    def test_failed_get_raises_with_status_line(self, make_request):
        """A failure status raises RequestError with endpoint and status line."""
        file = GettFile(
            sharename='abc123',
            fileid=7,
            request=make_request(lambda request: httpx.Response(404)),
        )

        with pytest.raises(RequestError) as exc_info:
            file.contents()

        message = str(exc_info.value)
        assert '/files/abc123/7/blob' in message
        assert '404 Not Found' in message
        assert exc_info.value.status_line == '404 Not Found'

    def test_missing_thumbnail_is_request_error(self, make_request):
        """A missing thumbnail is the same RequestError as any failed GET."""
        file = GettFile(
            sharename='abc123',
            fileid=7,
            request=make_request(lambda request: httpx.Response(404)),
        )

        with pytest.raises(RequestError, match='blob/thumb said 404 Not Found'):
            file.thumbnail()

    def test_contents_follows_redirect_to_blob_host(self, make_request):
        """A redirect from the API to the blob host is followed."""
        def handler(request):
            if request.url.path == '/1/files/s/0/blob':
                return httpx.Response(302, headers={'Location': 'https://blobs.example/s/0'})
            if request.url.host == 'blobs.example':
                return httpx.Response(200, content=b'real bytes')
            return httpx.Response(404)

        file = GettFile(sharename='s', fileid=0, request=make_request(handler))

        assert file.contents() == b'real bytes'

    def test_thumbnail_follows_redirect(self, make_request):
        """Thumbnails are fetched through redirects as well."""
        def handler(request):
            if request.url.path == '/1/files/s/0/blob/thumb':
                return httpx.Response(302, headers={'Location': 'https://blobs.example/s/0/thumb'})
            return httpx.Response(200, content=b'small')

        file = GettFile(sharename='s', fileid=0, request=make_request(handler))

        assert file.thumbnail() == b'small'
