from typing import List, Optional

import requests
from pydantic import PrivateAttr

from handins.errors import PortalError
from handins.interface.base.portal import Portal
from handins.model.assignment import AssignmentRecord
from handins.util.handinsapi import login, get_assignments, upload_submission


class Handins(Portal):
    _session: Optional[requests.Session] = PrivateAttr(default=None)

    # ---------------------------------------------------------------------------------------------------
    def open(self, username: str, password: str):
        self._session = requests.Session()
        login(self._session, self.base_url, username, password)

    # ---------------------------------------------------------------------------------------------------
    def close(self):
        if self._session is not None:
            self._session.close()
            self._session = None

    # ---------------------------------------------------------------------------------------------------
    def _require_session(self) -> requests.Session:
        if self._session is None:
            raise PortalError("Not logged in; call open() first")
        return self._session

    # ---------------------------------------------------------------------------------------------------
    def get_assignments(self, course_id: int) -> List[AssignmentRecord]:
        asgns = get_assignments(self._require_session(), self.base_url, course_id, self.time_zone)
        return [AssignmentRecord(name=a['name'], id=a['id'], grade=a['grade'],
                                 weight=a['weight'], due_date=a['due_date']) for a in asgns]

    # ---------------------------------------------------------------------------------------------------
    def submit(self, course_id: int, record: AssignmentRecord, path: str):
        upload_submission(self._require_session(), self.base_url, course_id, record.id, path)
