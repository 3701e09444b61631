"""Walkthrough of the map2d API on a small grade book.

This example stores grades keyed by (student, course) and demonstrates:
1. Mutation: insertion, overwrite and removal
2. Views: a row, a column and the transposed whole-map view
3. Conversion: element-wise copy into a new map
4. pandas: wide and long DataFrames
"""

from map2d import Map2D, get_logger, to_frame, to_long_frame

# Set up logging
logger = get_logger(__name__)


def create_grade_book() -> Map2D:
    """Create a small grade book."""
    grades = Map2D()
    grades.put_all_to_row({"math": 4.5, "physics": 4.0, "history": 3.0}, "alice")
    grades.put_all_to_row({"math": 3.5, "history": 5.0}, "bob")
    grades.put_all_to_column({"carol": 4.0, "dave": 3.0}, "physics")
    return grades


def demo_mutation():
    """Demonstrate insertion, overwrite and removal."""
    logger.info("\n" + "=" * 60)
    logger.info("1. MUTATION")
    logger.info("=" * 60)

    grades = create_grade_book()
    logger.info(f"\nGrade book holds {grades.size()} grades")

    previous = grades.put("bob", "math", 4.0)
    logger.info(f"Regraded bob/math: {previous} -> {grades.get('bob', 'math')}")

    grades.remove("dave", "physics")
    logger.info(f"Removed dave/physics, dave still enrolled: {grades.contains_row('dave')}")
    logger.info(f"Grade book holds {grades.size()} grades")


def demo_views():
    """Demonstrate row, column and whole-map views."""
    logger.info("\n" + "=" * 60)
    logger.info("2. VIEWS")
    logger.info("=" * 60)

    grades = create_grade_book()
    logger.info(f"\nalice: {dict(grades.row_view('alice'))}")
    logger.info(f"physics: {dict(grades.column_view('physics'))}")

    by_course = grades.column_map_view()
    for course, students in by_course.items():
        mean = sum(students.values()) / len(students)
        logger.info(f"  {course}: {len(students)} students, mean {mean:.2f}")


def demo_conversion():
    """Demonstrate copy_with_conversion."""
    logger.info("\n" + "=" * 60)
    logger.info("3. CONVERSION")
    logger.info("=" * 60)

    grades = create_grade_book()
    passed = grades.copy_with_conversion(str.title, str.upper, lambda g: g >= 3.5)
    logger.info(f"\nPass/fail: {passed!r}")


def demo_frames():
    """Demonstrate pandas interchange."""
    logger.info("\n" + "=" * 60)
    logger.info("4. PANDAS")
    logger.info("=" * 60)

    grades = create_grade_book()
    logger.info("\nWide layout:\n%s", to_frame(grades, sort=True))
    logger.info("\nLong layout:\n%s", to_long_frame(grades, "student", "course", "grade"))


def main():
    """Run all demonstrations."""
    logger.info("\n" + "#" * 60)
    logger.info("# MAP2D DEMONSTRATION")
    logger.info("#" * 60)

    demo_mutation()
    demo_views()
    demo_conversion()
    demo_frames()

    logger.info("\n" + "#" * 60)
    logger.info("# DEMONSTRATION COMPLETE")
    logger.info("#" * 60)


if __name__ == "__main__":
    main()
