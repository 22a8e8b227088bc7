"""
Example 02: Mapping Inference

This example classifies properties of hand-built schemas, without
reading any declaration files.
"""

from ts_mapper import PropertyDescriptor, SchemaEntity, infer


def main():
    user = SchemaEntity.of(
        "User",
        PropertyDescriptor("id", "number"),
        PropertyDescriptor("email", "string | null"),
        PropertyDescriptor("nickname", "string", is_optional=True),
    )
    user_view = SchemaEntity.of(
        "UserView",
        PropertyDescriptor("id", "number"),
        PropertyDescriptor("email", "string"),
        PropertyDescriptor("nickname", "string | undefined"),
        PropertyDescriptor("initials", "string"),
    )

    print("=== Inference ===\n")
    plan = infer(user, user_view)
    for prop in plan.properties:
        print(f"   {prop.name:<10} {prop.kind.value:<20} returns {prop.return_type}")
    print(f"\n   custom map optional: {plan.all_custom_optional}")


if __name__ == "__main__":
    main()
