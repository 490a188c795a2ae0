# threaded_comments/services/demo_data.py
from datetime import datetime, timedelta
from typing import List, Optional

from threaded_comments.models.comment import Comment
from threaded_comments.utils.datetime_utils import DateTimeUtils

DEMO_USER = {'user_id': 'u1', 'username': 'demo', 'password': 'demo'}


def demo_comments(now: Optional[datetime] = None) -> List[Comment]:
    """Sample discussion loaded at startup when SEED_DEMO_DATA is on."""
    now = now or DateTimeUtils.now()
    return [
        Comment(
            comment_id='1',
            parent_id=None,
            text='This is a great article! Really enjoyed reading it.',
            author='Alice Johnson',
            created_at=now - timedelta(hours=2),
            like_count=12
        ),
        Comment(
            comment_id='2',
            parent_id=None,
            text='I have some thoughts on the third point mentioned here.',
            author='Bob Smith',
            created_at=now - timedelta(hours=4),
            like_count=8
        ),
        Comment(
            comment_id='3',
            parent_id='1',
            text='Totally agree! The examples were really helpful.',
            author='Charlie Brown',
            created_at=now - timedelta(hours=1),
            like_count=5
        ),
        Comment(
            comment_id='4',
            parent_id='1',
            text='Could you elaborate on the second section?',
            author='Diana Prince',
            created_at=now - timedelta(minutes=30),
            like_count=3
        ),
        Comment(
            comment_id='5',
            parent_id='3',
            text='Yes, the code examples were particularly clear.',
            author='Eve Wilson',
            created_at=now - timedelta(minutes=15),
            like_count=2
        ),
    ]
