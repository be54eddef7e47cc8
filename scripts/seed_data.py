"""示例数据脚本。

患者（Patient）由外部子系统维护，本脚本为开发/演示环境补齐用户与患者，
并可选地生成设备与支付方式。

用法示例：
  python scripts/seed_data.py quick
  python scripts/seed_data.py demo --patients 50 --device-rate 0.6 --payment-methods 20
  python scripts/seed_data.py clear-demo
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from faker import Faker

# 确保可直接运行脚本时能找到 oneup 包
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from oneup import create_app  # noqa: E402
from oneup.extensions import db  # noqa: E402
from oneup.models import Device, Patient, PaymentMethod, User  # noqa: E402
from oneup.repositories import UserRepository  # noqa: E402

DEMO_PREFIX = "demo_"


def _ensure_user_with_patient(username: str, first_name: str, last_name: str) -> Patient:
    users = UserRepository()
    user = users.find_by_username(username)
    if not user:
        user = users.create(username=username, email=f"{username}@example.com")
        db.session.flush()
    patient = Patient.query.filter_by(user_id=user.id).first()
    if not patient:
        patient = Patient(first_name=first_name, last_name=last_name, user_id=user.id)
        db.session.add(patient)
        db.session.flush()
    return patient


def seed_quick():
    """快速最小可用数据：两名患者，其中一名已绑定设备，外加一张卡。"""
    p1 = _ensure_user_with_patient("patient1", "Ana", "Torres")
    _ensure_user_with_patient("patient2", "Luis", "Quispe")
    if not Device.query.filter_by(patient_id=p1.id).first():
        db.session.add(Device(product_quantity=3, patient=p1))
    if not PaymentMethod.query.first():
        db.session.add(PaymentMethod(card_number="4111111111111111", card_holder="Ana Torres", expiration_date="12/30"))
    db.session.commit()
    print("[seed] quick 数据已写入")


def seed_demo(patients: int, device_rate: float, payment_methods: int, seed: int | None = None):
    """批量生成演示患者、设备与支付方式。"""
    fake = Faker()
    if seed is not None:
        Faker.seed(seed)
        random.seed(seed)

    created_devices = 0
    for i in range(patients):
        first, last = fake.first_name(), fake.last_name()
        patient = _ensure_user_with_patient(f"{DEMO_PREFIX}{i:04d}", first, last)
        if patient.device is None and random.random() < device_rate:
            db.session.add(Device(product_quantity=random.randint(1, 10), patient=patient))
            created_devices += 1

    for _ in range(payment_methods):
        db.session.add(
            PaymentMethod(
                card_number=fake.credit_card_number(),
                card_holder=fake.name(),
                expiration_date=fake.credit_card_expire(),
            )
        )
    db.session.commit()
    print(f"[seed] demo 完成：患者 {patients}，设备 {created_devices}，支付方式 {payment_methods}")


def clear_demo():
    """清空 demo_* 用户及其患者、设备。"""
    users = User.query.filter(User.username.like(f"{DEMO_PREFIX}%")).all()
    for user in users:
        patient = Patient.query.filter_by(user_id=user.id).first()
        if patient:
            Device.query.filter_by(patient_id=patient.id).delete()
            db.session.delete(patient)
        db.session.delete(user)
    db.session.commit()
    print(f"[seed] 已删除 {len(users)} 个 demo 用户")


def main():
    ap = argparse.ArgumentParser(description="示例数据脚本")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("quick", help="快速最小数据")

    p_demo = sub.add_parser("demo", help="批量演示数据")
    p_demo.add_argument("--patients", type=int, default=50)
    p_demo.add_argument("--device-rate", type=float, default=0.6)
    p_demo.add_argument("--payment-methods", type=int, default=20)
    p_demo.add_argument("--seed", type=int, default=None)

    sub.add_parser("clear-demo", help="清空 demo_* 数据")

    args = ap.parse_args()

    app = create_app()
    with app.app_context():
        if args.cmd == "quick":
            seed_quick()
        elif args.cmd == "demo":
            seed_demo(args.patients, args.device_rate, args.payment_methods, args.seed)
        elif args.cmd == "clear-demo":
            clear_demo()


if __name__ == "__main__":
    main()
