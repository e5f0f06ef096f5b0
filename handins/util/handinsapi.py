import os
import re
import urllib.parse
import requests
import pendulum as plm
from bs4 import BeautifulSoup
from ..errors import PortalError
from .util import get_logger

NUMBER_REGEX = re.compile(r"^-?\d+(\.\d+)?")
ASSIGNMENT_ID_REGEX = re.compile(r"/assignments/(\d+)")


########################
# Public API functions
########################

# ----------------------------------------------------------------------------------------------------------------
def login(session, base_url, username, password):
    login_page = _get(session, base_url, 'login/')
    token = parse_csrf_token(login_page)

    params = {
        'utf8': '✓',
        'authenticity_token': token,
        'user[username]': username,
        'user[password]': password,
        'commit': 'Log in'
    }
    resp_text = _post(session, base_url, 'login/', data=params)

    # a failed login renders the login form again
    soup = BeautifulSoup(resp_text, features="lxml")
    if soup.find('input', attrs={'name': 'user[password]'}) is not None:
        raise PortalError(f"Login to {base_url} failed for user {username}. Check your username and password.")

    logger = get_logger()
    logger.info(f"Logged in to {base_url} as {username}")


# ----------------------------------------------------------------------------------------------------------------
def get_assignments(session, base_url, course_id, tz):
    page = _get(session, base_url, f'courses/{course_id}/assignments/', headers={'Referer': base_url})
    asgns = parse_assignments(page, tz)

    logger = get_logger()
    logger.info(f"Retrieved {len(asgns)} assignments from {base_url} for course {course_id}")
    return asgns


# ----------------------------------------------------------------------------------------------------------------
def upload_submission(session, base_url, course_id, assignment_id, path):
    suffix = f'courses/{course_id}/assignments/{assignment_id}/submissions/new'
    form_page = _get(session, base_url, suffix)
    soup = BeautifulSoup(form_page, features="lxml")

    file_input = soup.find('input', attrs={'type': 'file'})
    if file_input is None:
        raise PortalError(f"No upload form found for assignment {assignment_id} in course {course_id}")
    form = file_input.find_parent('form')
    action = form.get('action') or suffix

    data = {'utf8': '✓', 'authenticity_token': parse_csrf_token(form_page)}
    for hidden in form.find_all('input', attrs={'type': 'hidden'}):
        if hidden.get('name') and hidden.get('name') not in data:
            data[hidden['name']] = hidden.get('value', '')

    with open(path, 'rb') as f:
        _post(session, base_url, action, data=data,
              files={file_input['name']: (os.path.basename(path), f)})

    logger = get_logger()
    logger.info(f"Uploaded {path} to assignment {assignment_id} in course {course_id}")


# ----------------------------------------------------------------------------------------------------------------
def parse_csrf_token(html):
    soup = BeautifulSoup(html, features="lxml")
    meta = soup.find('meta', attrs={'name': 'csrf-token'})
    if meta is not None and meta.get('content'):
        return meta['content']
    hidden = soup.find('input', attrs={'name': 'authenticity_token'})
    if hidden is not None and hidden.get('value'):
        return hidden['value']
    raise PortalError("No CSRF token found on the page")


# ----------------------------------------------------------------------------------------------------------------
def parse_assignments(html, tz):
    """
    Parses the course assignment table.

    Each row links to its assignment (name and id), lists its weight and, once graded,
    its grade in the text-right cells, and its due date in a <time> element.
    Dates without an offset are interpreted in the timezone tz.
    """
    soup = BeautifulSoup(html, features="lxml")
    tbody = soup.find('tbody')
    if tbody is None:
        raise PortalError("No assignment table found; the page layout may have changed")

    logger = get_logger()
    asgns = []
    for row in tbody.find_all('tr'):
        link = row.find('a', href=True)
        if link is None:
            continue
        name = link.get_text(strip=True)
        id_match = ASSIGNMENT_ID_REGEX.search(link['href'])
        if id_match is None:
            raise PortalError(f"Could not read the id of assignment {name} from {link['href']}")

        # the first number in each bare text node is a weight or a grade
        numbers = []
        for cell in row.find_all(class_='text-right'):
            for text in cell.find_all(string=True, recursive=False):
                tokens = text.split()
                number = NUMBER_REGEX.match(tokens[0]) if len(tokens) > 0 else None
                if number is not None:
                    numbers.append(float(number.group(0)))
        if len(numbers) == 0:
            logger.warning(f"Assignment {name} has no weight listed. Skipping.")
            continue

        time = row.find('time')
        if time is None:
            raise PortalError(f"Assignment {name} has no due date")
        stamp = time.get('datetime') or time.get_text(strip=True)

        asgns.append({
            'name': name,
            'id': int(id_match.group(1)),
            'weight': numbers[0],
            'grade': numbers[1] if len(numbers) > 1 else None,
            'due_date': plm.parse(stamp, tz=tz)
        })
    return asgns


#################################
# Private HTTP functions
#################################

# ----------------------------------------------------------------------------------------------------------------
def _request(session, typ, base_url, path_suffix, **kwargs):
    url = urllib.parse.urljoin(base_url.rstrip('/') + '/', path_suffix.lstrip('/'))

    logger = get_logger()
    logger.info(f"{typ.upper()} request to URL: {url}")

    try:
        resp = session.request(typ, url, **kwargs)
        # raise any HTTP errors
        resp.raise_for_status()
    except requests.RequestException as e:
        raise PortalError(f"{typ.upper()} request to {url} failed: {e}") from e
    return resp.text


# ----------------------------------------------------------------------------------------------------------------
def _get(session, base_url, path_suffix, headers=None):
    return _request(session, 'get', base_url, path_suffix, headers=headers)


# ----------------------------------------------------------------------------------------------------------------
def _post(session, base_url, path_suffix, data=None, files=None):
    return _request(session, 'post', base_url, path_suffix, data=data, files=files)
