class DefaultRecordsInitializer:
    def create(self) -> list[dict]:
        return [
            {
                "name": "Jimmy",
                "city": "Stavanger",
                "age": 25,
                "phone": "83123",
                "address": "Kongsgata 12",
            },
            {"name": "Sara", "city": "Oslo", "age": 23},
            {"name": "Jon", "city": "Bergen", "age": 29},
        ]
