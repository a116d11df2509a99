from collections import Counter
from datetime import datetime

from librarydesk.repositories.borrow_repo import BorrowRepo
from librarydesk.repositories.member_repo import MemberRepo
from librarydesk.repositories.shelf_repo import ShelfRepo

TOP_SUBJECTS = 20


def _subject_distribution(items, first_only: bool = False) -> list[dict]:
    counter = Counter()
    for item in items:
        subjects = (item.book_data or {}).get("subject") or []
        if isinstance(subjects, str):
            subjects = [subjects]
        if first_only:
            subjects = subjects[:1]
        for s in subjects:
            if not isinstance(s, str):
                continue
            normalized = s.strip().lower()
            if normalized:
                counter[normalized] += 1

    ranked = sorted(counter.items(), key=lambda kv: (-kv[1], kv[0]))[:TOP_SUBJECTS]
    return [{"subject": subject, "count": count} for subject, count in ranked]


class StatisticsService:
    @staticmethod
    def collect(now: datetime | None = None) -> dict:
        now = now or datetime.utcnow()
        shelf_items = ShelfRepo.list_all()

        by_duration = sorted(
            ((d, c) for d, c in BorrowRepo.count_by_duration() if d),
            key=lambda kv: (-kv[1], kv[0]),
        )
        by_grade = sorted((g, c) for g, c in MemberRepo.count_by_grade() if g)

        return {
            "totalStudentsWithBorrows": BorrowRepo.count_all(),
            "totalMembers": MemberRepo.count_all(),
            "totalBooksOnShelf": len(shelf_items),
            "shelfBookDistributionBySubjectTag": _subject_distribution(shelf_items),
            "shelfBookDistributionByFirstSubject": _subject_distribution(shelf_items, first_only=True),
            "overdueBooksCount": BorrowRepo.count_overdue(now),
            "activeBorrowsByDuration": [{"duration": d, "count": c} for d, c in by_duration],
            "memberDistributionByAge": [{"age": a, "count": c} for a, c in MemberRepo.count_by_age()],
            "memberDistributionByGrade": [{"grade": g, "count": c} for g, c in by_grade],
            "lastUpdated": now.isoformat(),
        }
