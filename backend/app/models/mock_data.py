"""
Mock 数据 - 学校层级与装备清单
"""

MOCK_SCHOOLS = [
    {"id": "1", "name": "Lincoln High School", "city": "Springfield"},
    {"id": "2", "name": "Riverside Middle School", "city": "Springfield"},
    {"id": "3", "name": "Oakwood Elementary School", "city": "Shelbyville"},
]

MOCK_GRADES = [
    # Lincoln High School
    {"id": "9", "school_id": "1", "name": "Grade 9"},
    {"id": "10", "school_id": "1", "name": "Grade 10"},
    {"id": "11", "school_id": "1", "name": "Grade 11"},
    {"id": "12", "school_id": "1", "name": "Grade 12"},
    # Riverside Middle School
    {"id": "6", "school_id": "2", "name": "Grade 6"},
    {"id": "7", "school_id": "2", "name": "Grade 7"},
    {"id": "8", "school_id": "2", "name": "Grade 8"},
    # Oakwood Elementary School
    {"id": "1", "school_id": "3", "name": "Grade 1"},
    {"id": "2", "school_id": "3", "name": "Grade 2"},
    {"id": "3", "school_id": "3", "name": "Grade 3"},
]

MOCK_CLASSES = [
    {"id": "1", "school_id": "1", "grade_id": "9", "name": "9A"},
    {"id": "2", "school_id": "1", "grade_id": "9", "name": "9B"},
    {"id": "3", "school_id": "1", "grade_id": "9", "name": "9C"},
    {"id": "1", "school_id": "1", "grade_id": "10", "name": "10A"},
    {"id": "2", "school_id": "1", "grade_id": "10", "name": "10B"},
    {"id": "1", "school_id": "1", "grade_id": "11", "name": "11A"},
    {"id": "1", "school_id": "1", "grade_id": "12", "name": "12A"},
    {"id": "1", "school_id": "2", "grade_id": "6", "name": "6 Red"},
    {"id": "2", "school_id": "2", "grade_id": "6", "name": "6 Blue"},
    {"id": "1", "school_id": "2", "grade_id": "7", "name": "7 Red"},
    {"id": "1", "school_id": "2", "grade_id": "8", "name": "8 Red"},
    {"id": "1", "school_id": "3", "grade_id": "1", "name": "1st Grade Sunflowers"},
    {"id": "1", "school_id": "3", "grade_id": "2", "name": "2nd Grade Maples"},
    {"id": "1", "school_id": "3", "grade_id": "3", "name": "3rd Grade Owls"},
]

# 键: (学校, 年级, 班级)，未命中时使用 "default"
MOCK_EQUIPMENT_LISTS = {
    ("1", "9", "1"): [
        {"id": "e1", "name": "Graphing calculator", "quantity": 1, "notes": "TI-84 or equivalent"},
        {"id": "e2", "name": "Lab goggles", "quantity": 1},
        {"id": "e3", "name": "Spiral notebook", "quantity": 5},
        {"id": "e4", "name": "Blue pens", "quantity": 10},
    ],
    ("1", "10", "1"): [
        {"id": "e5", "name": "Scientific calculator", "quantity": 1},
        {"id": "e6", "name": "Chemistry lab coat", "quantity": 1},
        {"id": "e3", "name": "Spiral notebook", "quantity": 6},
    ],
    ("2", "7", "1"): [
        {"id": "e7", "name": "Geometry set", "quantity": 1, "notes": "compass, protractor, ruler"},
        {"id": "e8", "name": "Colored pencils", "quantity": 24},
        {"id": "e3", "name": "Spiral notebook", "quantity": 4},
    ],
    ("3", "1", "1"): [
        {"id": "e9", "name": "Crayons", "quantity": 24},
        {"id": "e10", "name": "Safety scissors", "quantity": 1},
        {"id": "e11", "name": "Glue sticks", "quantity": 4},
    ],
    "default": [
        {"id": "e3", "name": "Spiral notebook", "quantity": 3},
        {"id": "e12", "name": "Pencils", "quantity": 12},
        {"id": "e13", "name": "Eraser", "quantity": 2},
        {"id": "e14", "name": "Backpack", "quantity": 1},
    ],
}
