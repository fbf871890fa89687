"""Demo: Euribor 3M FRAs priced off a sample curve, then the curve moves and a fixing arrives."""

import datetime

from fra.curves import ZeroRateCurve
from fra.dates import BusinessDayConvention, Period, WeekendsOnly
from fra.daycounters import Actual360, Actual365Fixed
from fra.indexes import IborIndex
from fra.products.forward_rate_agreement import ForwardRateAgreement, Position
from fra.settings import Settings


def main() -> None:
    today = datetime.date(2024, 3, 1)
    settings = Settings(evaluation_date=today)
    calendar = WeekendsOnly()

    tenors = [Period.parse(t) for t in ("3M", "6M", "1Y", "2Y", "5Y")]
    pillars = [calendar.advance_period(today, p) for p in tenors]
    curve = ZeroRateCurve(
        reference_date=today,
        dates=pillars,
        zero_rates=[0.039, 0.038, 0.036, 0.033, 0.030],
        day_counter=Actual365Fixed(),
        calendar=calendar,
        name="EUR_ESTR",
    )
    euribor3m = IborIndex(
        "Euribor",
        "3M",
        fixing_days=2,
        fixing_calendar=calendar,
        business_day_convention=BusinessDayConvention.MODIFIED_FOLLOWING,
        day_counter=Actual360(),
        forwarding_curve=curve,
    )

    # 3x6 FRA, par approximation on the index curve
    start = calendar.advance_period(today, Period.parse("3M"))
    fra_3x6 = ForwardRateAgreement.from_index(
        start, Position.LONG, 0.035, 10_000_000, euribor3m,
        use_indexed_coupon=False, settings=settings,
    )
    # 6x12 FRA priced straight off the curve
    fra_6x12 = ForwardRateAgreement(
        calendar.advance_period(today, Period.parse("6M")),
        calendar.advance_period(today, Period.parse("1Y")),
        Position.SHORT, 0.034, 5_000_000,
        discount_curve=curve, settings=settings,
    )

    print("=== FRA Demo ===\n")
    print(f"Evaluation date: {today.isoformat()}, index: {euribor3m.name}\n")
    for label, fra in (("3x6 long 10M @ 3.50%", fra_3x6), ("6x12 short 5M @ 3.40%", fra_6x12)):
        print(label)
        print(f"   fixing   = {fra.fixing_date().isoformat()}")
        print(f"   forward  = {fra.forward_rate()}")
        print(f"   amount   = {fra.amount():,.2f}")
        print(f"   NPV      = {fra.npv():,.2f}\n")

    curve.update_rates([r + 0.0010 for r in curve.zero_rates])
    print("After +10bp parallel move:")
    print(f"   3x6 NPV  = {fra_3x6.npv():,.2f}")
    print(f"   6x12 NPV = {fra_6x12.npv():,.2f}\n")

    settings.evaluation_date = fra_3x6.fixing_date()
    euribor3m.add_fixing(fra_3x6.fixing_date(), 0.0395)
    fixed = ForwardRateAgreement.from_index(
        start, Position.LONG, 0.035, 10_000_000, euribor3m, settings=settings,
    )
    print(f"On the fixing date ({settings.evaluation_date.isoformat()}), fixing 3.95%:")
    print(f"   forward  = {fixed.forward_rate()}")
    print(f"   amount   = {fixed.amount():,.2f}")
    print(f"   NPV      = {fixed.npv():,.2f}\n")
    print("Done.")


if __name__ == "__main__":
    main()
