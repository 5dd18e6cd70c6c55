from django.test import SimpleTestCase

from timelines.layout.dates import (
    FALLBACK_TIMESTAMP,
    event_sort_key,
    parse_date_to_timestamp,
    start_text_for,
    timestamp_for,
)


class ParseDateToTimestampTests(SimpleTestCase):

    def test_year_day_phrases_order_chronologically(self):
        first = parse_date_to_timestamp('Year 1, Day 5')
        later = parse_date_to_timestamp('Year 1, Day 300')
        next_year = parse_date_to_timestamp('Year 2, Day 1')
        self.assertLess(first, later)
        self.assertLess(later, next_year)

    def test_unit_phrase_adds_up_in_years(self):
        self.assertAlmostEqual(parse_date_to_timestamp('Year 1, Day 5'), 1 + 5 / 365)
        self.assertAlmostEqual(parse_date_to_timestamp('Year 2, Month 3'), 2.25)
        self.assertAlmostEqual(parse_date_to_timestamp('Century 3'), 300)
        self.assertAlmostEqual(parse_date_to_timestamp('5 years'), 5)

    def test_before_era_is_negative(self):
        self.assertEqual(parse_date_to_timestamp('500 BCE'), -500)
        self.assertEqual(parse_date_to_timestamp('500 B.C.'), -500)
        self.assertLess(parse_date_to_timestamp('500 BC'), parse_date_to_timestamp('100 AD'))

    def test_calendar_dates(self):
        march = parse_date_to_timestamp('2024-03-15')
        self.assertAlmostEqual(march, 2024 + 74 / 366)
        self.assertLess(march, parse_date_to_timestamp('2024-03-16'))
        self.assertLess(parse_date_to_timestamp('March 1, 2023'), march)

    def test_full_iso_timestamps(self):
        day = parse_date_to_timestamp('2024-03-15')
        next_day = parse_date_to_timestamp('2024-03-16')
        early_january = parse_date_to_timestamp('2024-01-02')
        for text in ['2024-03-15T10:00:00Z', '2024-03-15T10:00:00.000Z', '2024-03-15T12:00:00+02:00']:
            with self.subTest(text=text):
                value = parse_date_to_timestamp(text)
                self.assertGreater(value, early_january)
                self.assertGreaterEqual(value, day)
                self.assertLess(value, next_day)

    def test_offsets_compare_as_instants(self):
        self.assertAlmostEqual(
            parse_date_to_timestamp('2024-03-15T12:00:00+02:00'),
            parse_date_to_timestamp('2024-03-15T10:00:00Z'),
        )

    def test_day_first_slash_dates(self):
        self.assertAlmostEqual(parse_date_to_timestamp('15/03/2024'), parse_date_to_timestamp('2024-03-15'))
        # Ambiguous dates read month-first
        self.assertAlmostEqual(parse_date_to_timestamp('03/04/2024'), parse_date_to_timestamp('2024-03-04'))

    def test_days_run_forward_inside_a_bce_year(self):
        day_1 = parse_date_to_timestamp('Year 5, Day 1 BCE')
        day_300 = parse_date_to_timestamp('Year 5, Day 300 BCE')
        self.assertLess(day_1, day_300)
        self.assertLess(parse_date_to_timestamp('Year 6, Day 300 BCE'), day_1)
        self.assertLess(day_300, parse_date_to_timestamp('Year 4, Day 1 BCE'))
        self.assertLess(parse_date_to_timestamp('Day 3 BCE'), 0)

    def test_plain_numbers(self):
        self.assertEqual(parse_date_to_timestamp('1200'), 1200)
        self.assertEqual(parse_date_to_timestamp(1200), 1200)
        self.assertEqual(parse_date_to_timestamp('Year −3'), -3)

    def test_unparseable_text_falls_back(self):
        for text in ['', '   ', None, 'the dawn of time', 'Before the Sundering']:
            with self.subTest(text=text):
                self.assertEqual(parse_date_to_timestamp(text), FALLBACK_TIMESTAMP)

    def test_same_input_same_output(self):
        values = {parse_date_to_timestamp('Year 7, Day 120') for _ in range(5)}
        self.assertEqual(len(values), 1)


class EventHelperTests(SimpleTestCase):

    def test_start_text_reads_dicts_and_objects(self):
        class Event:
            start_date = 'Year 4'

        self.assertEqual(start_text_for({'startDate': 'Year 3'}), 'Year 3')
        self.assertEqual(start_text_for({'start_date': 'Year 3'}), 'Year 3')
        self.assertEqual(start_text_for(Event()), 'Year 4')
        self.assertEqual(start_text_for({}), '')
        self.assertEqual(timestamp_for(Event()), 4)

    def test_sort_key_breaks_fallback_ties_by_text_then_index(self):
        keys = [
            event_sort_key(0.0, 'Unknown', 0),
            event_sort_key(0.0, 'Long ago', 1),
            event_sort_key(0.0, 'Long ago', 2),
        ]
        self.assertEqual(sorted(keys), [keys[1], keys[2], keys[0]])
