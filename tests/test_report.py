import sys
import os
import io

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from models import ClientAccount
from report import SNAPSHOT_HEADER, format_account_row, render_snapshot, write_snapshot


class TestReport:
    def test_format_account_row(self):
        account = ClientAccount(client_id=1, available=15000, held=2500, locked=False)
        assert format_account_row(account) == "1,1.5000,0.2500,1.7500,false"

    def test_locked_rendered_lowercase(self):
        account = ClientAccount(client_id=2, locked=True)
        assert format_account_row(account) == "2,0.0000,0.0000,0.0000,true"

    def test_render_snapshot_header_first(self):
        lines = list(render_snapshot([ClientAccount(client_id=1), ClientAccount(client_id=2)]))
        assert lines[0] == SNAPSHOT_HEADER == "client,available,held,total,locked"
        assert lines[1].startswith("1,")
        assert lines[2].startswith("2,")

    def test_empty_snapshot_has_header_only(self):
        assert list(render_snapshot([])) == [SNAPSHOT_HEADER]

    def test_write_snapshot(self):
        stream = io.StringIO()
        write_snapshot([ClientAccount(client_id=1, available=10000)], stream)
        assert stream.getvalue() == "client,available,held,total,locked\n1,1.0000,0.0000,1.0000,false\n"
